import os

SECRET_KEY = "test-secret"

# Tests normally override this with a temporary file.
DB_PATH = os.getenv("DB_PATH", ":memory:")

TOKEN_TTL_MINUTES = 60
IMPORT_BATCH_SIZE = 1000

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True

AUTO_INIT_DB = True
