# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use .env (local, gitignored) for machine-specific values.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODOLIST_APP_NAME": "App display name (default: todo-list).",
    "TODOLIST_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Storage
    "TODOLIST_STORAGE": "Storage backend: sqlite | memory (default: sqlite).",
    "TODOLIST_DATA_DIR": "Local data + log directory (default: .local/todo).",
    "TODOLIST_DB_PATH": "SQLite file (default: <data_dir>/todo.sqlite3).",
    # Startup
    "TODOLIST_AUTO_INSTANTIATE": "Write contract version metadata on first start (default: true).",
}
