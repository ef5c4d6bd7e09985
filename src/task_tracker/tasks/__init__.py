"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_store.py: JSON-file storage + id/lookup helpers
- task_commands.py: one handler per user command (add/update/delete/mark/list)
"""
