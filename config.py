import os
from typing import List, Optional


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.environ.get(name)
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


SESSION_SIZE = _env_int("CONNECTIONS_SESSION_SIZE", 4)
MAX_MISTAKES = _env_int("CONNECTIONS_MAX_MISTAKES", 4)

# Unset means system entropy
SEED = _env_int("CONNECTIONS_SEED", None)
DAILY_MODE = _env_flag("CONNECTIONS_DAILY_MODE")

CORS_ORIGINS = _env_list("CONNECTIONS_CORS_ORIGINS", [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
])

HOST = os.environ.get("CONNECTIONS_HOST", "0.0.0.0")
PORT = _env_int("CONNECTIONS_PORT", 8000)

LOG_UTC_OFFSET = _env_int("CONNECTIONS_LOG_UTC_OFFSET", 0)
