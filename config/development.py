import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY

DATA_DIR = Config.DATA_DIR
STATE_KEY = Config.STATE_KEY
PRINT_SETTINGS_KEY = Config.PRINT_SETTINGS_KEY

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
