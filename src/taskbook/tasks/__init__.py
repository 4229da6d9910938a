"""
Task subsystem.

Components:
- ids.py: Id value type and IdGenerator
- task_models.py: data structures (Task, State, Tag, Tasks, Tags)
- codecs.py: JSON encode/decode pairs for the on-disk format
- memory_model.py: in-memory TaskModel
- persistent_model.py: JSON-file-backed TaskModel
"""
