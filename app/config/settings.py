import os
import tempfile
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field

DEFAULT_TARGET_URL = "https://brtgw.britam.com/image_now/uat/api/v1/upload/"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


class Settings(BaseModel):
    """Runtime configuration for the relay service."""

    host: str = "0.0.0.0"
    port: int = 3000
    default_target_url: str = DEFAULT_TARGET_URL
    fetch_timeout: float = Field(60.0, gt=0)
    forward_timeout: float = Field(120.0, gt=0)
    staging_dir: str = Field(default_factory=tempfile.gettempdir)
    chunk_size: int = Field(8192, gt=0)
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=_int_env("PORT", 3000),
            default_target_url=os.getenv("RELAY_TARGET_URL") or DEFAULT_TARGET_URL,
            fetch_timeout=_float_env("RELAY_FETCH_TIMEOUT", 60.0),
            forward_timeout=_float_env("RELAY_FORWARD_TIMEOUT", 120.0),
            staging_dir=os.getenv("RELAY_STAGING_DIR") or tempfile.gettempdir(),
            chunk_size=_int_env("RELAY_CHUNK_SIZE", 8192),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings loaded once per process from the environment."""
    return Settings.from_env()
