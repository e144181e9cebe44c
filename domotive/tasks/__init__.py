"""Tasks - the to-do list

Components:
    factory.py: Materialize an accepted template as a new task
    manager.py: Add, list, complete and delete tasks

A task created from a template is a snapshot: later edits to the template
do not reach it.
"""

# Default due date offset for tasks created from templates
DEFAULT_DUE_OFFSET_DAYS = 1

__all__ = ["DEFAULT_DUE_OFFSET_DAYS"]
