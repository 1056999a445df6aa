"""
Configuration settings for the school site application
Values come from the environment (a local .env file is loaded first)
"""
import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

DEBUG = os.getenv('DEBUG', 'False') == 'True'

# Get mode (development or production)
MODE = os.getenv("MODE", "development")


def get_env_var(key: str, default: str = None) -> str:
    """Fetch an environment variable and raise an error if it's missing (unless default is provided)."""
    value = os.getenv(key, default)
    if value is None and default is None:
        raise ValueError(f"Missing environment variable: {key}")
    return value


# Required settings - the process refuses to start without them
DATABASE_URL = get_env_var("DATABASE_URL")
JWT_SECRET = get_env_var("JWT_SECRET")

# Session tokens
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRE_HOURS = int(os.getenv("JWT_EXPIRE_HOURS", "8"))

# Create tables and seed default pages on startup (alembic is used otherwise)
DB_CREATE_TABLES = os.getenv("DB_CREATE_TABLES", "False") == "True"

# Listen port
PORT = int(os.getenv("PORT", "5000"))

# Uploaded media lives on disk and is served under UPLOAD_URL_PREFIX
UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", str(BASE_DIR / "public" / "uploads")))
UPLOAD_URL_PREFIX = "/uploads"

# CORS Configuration
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ALLOWED_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5000,http://127.0.0.1:5000",
    ).split(",")
    if origin.strip()
]

CORS_ALLOW_CREDENTIALS = True

# Front end: where the site renderer sends its API calls. Empty means the
# same application, called in-process.
SITE_API_BASE_URL = os.getenv("SITE_API_BASE_URL", "")

# Prefix for media URLs rendered into pages (e.g. a CDN host)
MEDIA_BASE_URL = os.getenv("MEDIA_BASE_URL", "")

# Defaults for reset_admin_password.py
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@wesleyhigh.edu")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")
