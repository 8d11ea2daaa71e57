# jobly/config.py
# Shared config for the app; everything is read from the environment once.

from __future__ import annotations
import os

from dotenv import load_dotenv

load_dotenv()

JOBLY_ENV = os.getenv("JOBLY_ENV", "development")

SECRET_KEY = os.getenv("SECRET_KEY", "secret-dev")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TTL = int(os.getenv("ACCESS_TOKEN_TTL_SECONDS", "86400"))  # 1d

DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", "1"))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", "10"))

origins_raw = os.getenv("CORS_ALLOW_ORIGINS", "")
CORS_ALLOW_ORIGINS = [o.strip() for o in origins_raw.split(",") if o.strip()]


def get_database_uri() -> str:
    """Use the test database when JOBLY_ENV=test, otherwise DATABASE_URL."""
    if JOBLY_ENV == "test":
        return os.getenv("TEST_DATABASE_URL", "postgresql:///jobly_test")
    return os.getenv("DATABASE_URL", "postgresql:///jobly")
