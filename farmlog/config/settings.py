# farmlog/config/settings.py
import os

from dotenv import load_dotenv

# values from a local .env file take precedence over the defaults below
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


APP_NAME: str = "Farmlog"
APP_VERSION: str = "1.4.0"
SECRET_KEY: str = os.getenv("FARMLOG_SECRET_KEY", "change-this-in-production-please-32bytes")
SESSION_COOKIE: str = "farmlog_session"

# DB-URL (sqlite file lives under ./db/ unless DATABASE_URL points elsewhere)
DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./db/farmlog.db")

# Used when DATABASE_URL cannot be initialised at startup
FALLBACK_DATABASE_URL: str = "sqlite://"

# Seed account, created on startup when no user with this name exists
ADMIN_USERNAME: str = os.getenv("FARMLOG_ADMIN_USERNAME", "admin")
ADMIN_PASSWORD: str = os.getenv("FARMLOG_ADMIN_PASSWORD", "admin1234")

# Load the sample farm records into an empty database
SEED_DEMO_DATA: bool = _env_flag("FARMLOG_SEED_DEMO", False)

LOG_LEVEL: str = os.getenv("FARMLOG_LOG_LEVEL", "INFO").upper()

DEFAULT_SUMMARY_DAYS: int = 30
MAX_SUMMARY_DAYS: int = 36500

HOST: str = os.getenv("FARMLOG_HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "5000"))
