import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./petsitting.db")

# Connection pool settings (ignored for SQLite)
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "20"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "30"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "300"))
DB_LOG_SLOW_QUERIES = os.getenv("DB_LOG_SLOW_QUERIES", "true").lower() == "true"
DB_SLOW_QUERY_THRESHOLD = float(os.getenv("DB_SLOW_QUERY_THRESHOLD", "1.0"))

# CORS origins for the web and mobile frontends
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:5173,http://localhost:3000,http://localhost:19006",
).split(",")

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# Analytics defaults
DEFAULT_TOP_SITTERS_LIMIT = int(os.getenv("DEFAULT_TOP_SITTERS_LIMIT", "10"))
RECENT_USERS_LIMIT = int(os.getenv("RECENT_USERS_LIMIT", "10"))

# Search result caps
SEARCH_RESULT_LIMIT = int(os.getenv("SEARCH_RESULT_LIMIT", "20"))
SEARCH_SUGGESTION_LIMIT = int(os.getenv("SEARCH_SUGGESTION_LIMIT", "5"))
