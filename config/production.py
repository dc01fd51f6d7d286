import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_DIR = os.getenv("DATA_DIR", "/var/lib/teacher-attendance")
STATE_KEY = Config.STATE_KEY
PRINT_SETTINGS_KEY = Config.PRINT_SETTINGS_KEY

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
