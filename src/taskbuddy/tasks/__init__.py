"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskKind)
- task_list.py: ordered list with 1-based numbering and bounds checks
- task_codec.py: one-line text records (encode/decode)
- task_store.py: flat-file storage built on the codec
"""
