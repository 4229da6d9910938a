"""taskbook: a small task tracker with in-memory and JSON-file storage."""

__version__ = "0.1.0"
