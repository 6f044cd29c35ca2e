"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskResponse)
- codec.py: binary encoding of the whole collection
- task_store.py: load/save of the collection under the fixed storage key
"""
