"""Project-level configuration and path helpers."""

import os
from pathlib import Path
from typing import Union

# Cache key holding the serialized CatalogCacheRecord
SUPPORTED_NETWORKS_KEY = "supported-networks"
FIVE_MINUTES_MS = 5 * 60 * 1000

DEFAULT_LEARNWEB3_API_URL = "https://learnweb3.io/api/faucet"
DEFAULT_FRAME_BASE_URL = "http://localhost:3000/receipt"


PathLike = Union[str, Path]


def get_home_dir() -> Path:
    """Root for data and logs: FAUCET_HOME, else the working directory."""
    home = os.getenv("FAUCET_HOME")
    return Path(home) if home else Path.cwd()


def default_db_path() -> Path:
    return get_home_dir() / "data" / "faucet.db"


def default_log_path() -> Path:
    return get_home_dir() / "logs" / "app.log"


def resolve_db_path(env_value: PathLike | None = None) -> PathLike:
    """Resolve DATABASE_URL to an absolute path. Directories are not created."""
    if not env_value:
        return default_db_path()

    if str(env_value) == ":memory:":
        return ":memory:"

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else get_home_dir() / candidate


def get_frame_base_url() -> str:
    """Base URL of the receipt frame, without query string."""
    return os.getenv("FRAME_BASE_URL", DEFAULT_FRAME_BASE_URL)


def get_session_ttl_seconds() -> float | None:
    """Session TTL from SESSION_TTL_SECONDS; unset or 0 disables eviction."""
    raw = os.getenv("SESSION_TTL_SECONDS")
    if not raw:
        return None
    ttl = float(raw)
    return ttl if ttl > 0 else None
