import os
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./cleantrack.db")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Billing defaults
# Price assumed for a session that has no stored price (read time only, never written back)
DEFAULT_SESSION_PRICE = Decimal(os.getenv("DEFAULT_SESSION_PRICE", "150"))
# Welcome pack fee used until an admin stores one through /settings/welcome-pack
WELCOME_PACK_FEE = Decimal(os.getenv("WELCOME_PACK_FEE", "0"))

# Analytics
TREND_MONTHS = int(os.getenv("TREND_MONTHS", "6"))
UPCOMING_DAYS = int(os.getenv("UPCOMING_DAYS", "7"))

# Pagination
DEFAULT_PAGE_LIMIT = int(os.getenv("DEFAULT_PAGE_LIMIT", "50"))
MAX_PAGE_LIMIT = int(os.getenv("MAX_PAGE_LIMIT", "500"))

# CORS
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:3000,http://localhost:5173",
).split(",")
