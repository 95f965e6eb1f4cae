# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name, also the list header (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKPAD_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/taskpad.log (true/false, default: true).",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory (default: .local/taskpad).",
    "TASKPAD_STORAGE_PATH": "Key-value storage file (default: <data_dir>/local_storage.json).",
    # Storage
    "TASKPAD_STORAGE_KEY": "Key holding the JSON task array (default: tasks).",
    "TASKPAD_STORAGE_QUOTA_BYTES": "Max bytes of all stored keys+values (default: 5242880).",
}
