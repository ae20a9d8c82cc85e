import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY
DB_PATH = Config.DB_PATH

TOKEN_TTL_MINUTES = Config.TOKEN_TTL_MINUTES
IMPORT_BATCH_SIZE = Config.IMPORT_BATCH_SIZE

ADMIN_USERNAME = Config.ADMIN_USERNAME
ADMIN_PASSWORD = Config.ADMIN_PASSWORD

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
DEBUG = True

AUTO_INIT_DB = Config.AUTO_INIT_DB
