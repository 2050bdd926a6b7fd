import os
from pathlib import Path

# Project root = repository checkout
PROJECT_ROOT = Path(__file__).resolve().parents[2]

DATA_DIR = Path(os.getenv("DATA_DIR", str(PROJECT_ROOT / "data")))
KITCHEN_DB = Path(os.getenv("KITCHEN_DB", str(DATA_DIR / "kitchen.sqlite3")))
SNAPSHOT_PATH = Path(os.getenv("SNAPSHOT_PATH", str(DATA_DIR / "session_snapshots.json")))

# --- Version / build metadata (override via systemd env) ---
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
GIT_SHA = os.getenv("GIT_SHA", "unknown")
BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

# --- Upstream chat completion API (only the proxy talks to it) ---
LUNOS_API_KEY = os.getenv("LUNOS_API_KEY", "")
LUNOS_BASE_URL = os.getenv("LUNOS_BASE_URL", "https://api.lunos.tech/v1")
LUNOS_MODEL = os.getenv("LUNOS_MODEL", "google/gemini-2.0-flash-lite")

# --- Generation client -> proxy ---
CHAT_PROXY_URL = os.getenv("CHAT_PROXY_URL", "http://127.0.0.1:8000/api/chat")
MAX_TOKENS = int(os.getenv("MAX_TOKENS", "8192"))
CHAT_TIMEOUT_S = float(os.getenv("CHAT_TIMEOUT_S", "120"))

RECIPE_TEMPERATURE = 0.9
ADVICE_TEMPERATURE = 0.7

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
