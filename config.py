# config.py
import os

from dotenv import load_dotenv

load_dotenv()

# MongoDB
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DB = os.getenv("MONGODB_DB", "hotel_booking")

# All booking dates are compared in this single offset (Indian Standard Time by default)
BOOKING_UTC_OFFSET = os.getenv("BOOKING_UTC_OFFSET", "+05:30")

# Shared admin credential; generate the hash with `ADMIN_PASSWORD=... python seed.py`
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "")
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH", "")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Client side
API_URL = os.getenv("API_URL", "http://127.0.0.1:8000/api/")
CACHE_PATH = os.getenv("CACHE_PATH", os.path.join(os.path.expanduser("~"), ".hotel_booking_cache.json"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
