import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "hr-portal-dev-secret"

    DB_PATH = os.environ.get("DB_PATH", os.path.join("data", "hr_portal.db"))

    TOKEN_TTL_MINUTES = int(os.environ.get("TOKEN_TTL_MINUTES", "60"))
    IMPORT_BATCH_SIZE = int(os.environ.get("IMPORT_BATCH_SIZE", "1000"))

    # Seeded on first start when the users table has no such user.
    ADMIN_USERNAME = os.environ.get("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "admin123")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "1")))
