"""Settings shared by every environment (all overridable via environment variables)."""

import os

from ..core.constants import (
    DEFAULT_IMGBB_UPLOAD_URL,
    DEFAULT_OFFICE_LATITUDE,
    DEFAULT_OFFICE_LONGITUDE,
    DEFAULT_RADIUS_METERS,
    DEFAULT_UPLOAD_TIMEOUT_SECONDS,
)

TRUE_VALUES = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean env var: 1/true/yes/on (any case) enable it."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in TRUE_VALUES


DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "geo_attendance"),
    "connection_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "15")),
}

# Geofence
OFFICE_LATITUDE = float(os.getenv("OFFICE_LATITUDE", str(DEFAULT_OFFICE_LATITUDE)))
OFFICE_LONGITUDE = float(os.getenv("OFFICE_LONGITUDE", str(DEFAULT_OFFICE_LONGITUDE)))
RADIUS_METERS = float(os.getenv("RADIUS_METERS", str(DEFAULT_RADIUS_METERS)))

# Photo evidence hosting (ImgBB). Empty key => raw photo data is stored instead.
IMGBB_API_KEY = os.getenv("IMGBB_API_KEY", "")
IMGBB_UPLOAD_URL = os.getenv("IMGBB_UPLOAD_URL", DEFAULT_IMGBB_UPLOAD_URL)
UPLOAD_TIMEOUT_SECONDS = float(os.getenv("UPLOAD_TIMEOUT_SECONDS", str(DEFAULT_UPLOAD_TIMEOUT_SECONDS)))

# Verification: "non_empty" accepts any token, "exact" requires QR_TOKEN.
VERIFICATION_MODE = os.getenv("VERIFICATION_MODE", "non_empty")
QR_TOKEN = os.getenv("QR_TOKEN", "OFFICE_CHECKIN_SYSTEM")

# Use the store's conditional writes instead of read-then-write.
ATOMIC_WRITES = env_flag("ATOMIC_WRITES")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
