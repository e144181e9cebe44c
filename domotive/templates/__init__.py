"""Templates - the catalog the suggestion engine draws from

Components:
    builtin.py: The templates shipped with the app
    catalog.py: List, create, edit and delete templates; seed built-ins

Mood ranges are comma-separated inclusive ranges over the 1-10 mood scale,
e.g. "1-4" or "1-3, 8-10". Built-in templates cannot be edited or deleted.
"""

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5

__all__ = ["MIN_DIFFICULTY", "MAX_DIFFICULTY"]
