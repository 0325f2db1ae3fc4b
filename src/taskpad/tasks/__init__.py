"""
Task subsystem.

Components:
- task_models.py: data structures (Task, FilterMode, events) + text validation
- task_ids.py: clock + counter id allocation
- task_store.py: in-memory ordered collection with snapshot persistence
- filter_view.py: all/active/completed projection
- edit_session.py: single-slot edit state machine
"""
