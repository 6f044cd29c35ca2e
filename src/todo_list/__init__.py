"""
Task list stored as one binary blob in a key/value backend.

Entry points live in `todo_list.contract`; `todo_list.host` runs them
against a storage backend with all-or-nothing writes.
"""

__version__ = "0.1.0"
