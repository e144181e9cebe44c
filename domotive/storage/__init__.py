"""Storage - repositories for every DoMotive record kind

Components:
    base.py: Abstract repository interfaces with typed query methods
    sqlite_store.py: SQLite implementation of all of them in one file
"""
