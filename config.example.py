# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Log file level (default: INFO). Console shows warnings only.",
    # Storage
    "TASKPAD_DATA_DIR": "Local data directory (default: .local/taskpad).",
    "TASKPAD_STORAGE_BACKEND": "json (one JSON file) or sqlite (key-value table). Default: json.",
    "TASKPAD_STORAGE_PATH": (
        "Storage file (default: <data_dir>/tasks.json or <data_dir>/tasks.sqlite3)."
    ),
    "TASKPAD_STORAGE_KEY": "Key the task snapshot is stored under (default: todos).",
    # UI
    "TASKPAD_SEED_SAMPLES": "Add welcome tasks when the list is empty on start (default: true).",
    "TASKPAD_NOTIFICATION_HOLD_SECONDS": "How long notifications stay visible (default: 3).",
    "TASKPAD_DEFAULT_FILTER": "Initial filter: all | active | completed (default: all).",
}
