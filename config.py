# config.py
import os
import logging
from dotenv import load_dotenv

from errors import ConfigurationError

load_dotenv()

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Set up logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))


def get_database_name() -> str:
    """Return the configured database name, failing fast when it is missing."""
    db_name = os.getenv("DB_NAME", DB_NAME)
    if not db_name:
        raise ConfigurationError("DB_NAME environment variable is not set")
    return db_name
