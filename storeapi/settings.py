# storeapi/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

# The server binds to 0.0.0.0:8080 unless STORE_HOST/STORE_PORT override it.
STORE_HOST = os.getenv("STORE_HOST", "0.0.0.0")
STORE_PORT = int(os.getenv("STORE_PORT", 8080))
STORE_LOG_LEVEL = os.getenv("STORE_LOG_LEVEL", "INFO").upper()
STORE_SEED_CATALOG = os.getenv("STORE_SEED_CATALOG", "true").lower() in ("1", "true", "yes")
STORE_API_URL = os.getenv("STORE_API_URL", f"http://127.0.0.1:{STORE_PORT}")
