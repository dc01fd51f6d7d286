import os

SECRET_KEY = "test-secret"

# Empty DATA_DIR means in-memory storage
DATA_DIR = os.getenv("DATA_DIR", "")
STATE_KEY = "attendanceApp"
PRINT_SETTINGS_KEY = "attendancePrintSettings"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
