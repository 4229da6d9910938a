# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKBOOK_APP_NAME": "App display name (default: taskbook).",
    "TASKBOOK_LOG_LEVEL": "Console logging level (default: INFO).",
    # Storage
    "TASKBOOK_BACKEND": "Task backend: memory | persistent (default: persistent).",
    "TASKBOOK_SEED_DEFAULTS": "Start the memory backend with demo tasks (true/false, default: true).",
    # Paths (gitignored)
    "TASKBOOK_DATA_DIR": "Local data directory, also holds taskbook.log (default: .local/taskbook).",
    "TASKBOOK_TASKS_PATH": "Task collection JSON (default: <data_dir>/tasks.json).",
    "TASKBOOK_ID_PATH": "Next-id counter JSON (default: <data_dir>/id.json).",
}
