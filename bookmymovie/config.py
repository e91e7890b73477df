import os


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# ---------- catalog source ----------
CATALOG_SOURCE = os.getenv("CATALOG_SOURCE", "memory")  # memory | http
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3001/api")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "5.0"))    # seconds
CATALOG_LATENCY = float(os.getenv("CATALOG_LATENCY", "1.0"))

# ---------- booking ----------
SEAT_PRICE = float(os.getenv("SEAT_PRICE", "12.50"))
BOOKING_DELAY = float(os.getenv("BOOKING_DELAY", "0.8"))
REJECT_EMPTY_SEATS = _flag("REJECT_EMPTY_SEATS")

# ---------- auth (demo only) ----------
MIN_PASSWORD_LENGTH = int(os.getenv("MIN_PASSWORD_LENGTH", "6"))
JWT_SECRET = os.getenv("JWT_SECRET", "devsecret")
JWT_ALGO = os.getenv("JWT_ALGO", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

# ---------- runtime ----------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "8000"))
