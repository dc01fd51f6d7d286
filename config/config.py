import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Durable key-value storage: one JSON file per key inside DATA_DIR
    DATA_DIR = os.environ.get("DATA_DIR", "data")
    STATE_KEY = os.environ.get("STATE_KEY", "attendanceApp")
    PRINT_SETTINGS_KEY = os.environ.get("PRINT_SETTINGS_KEY", "attendancePrintSettings")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
