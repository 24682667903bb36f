import logging
import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://127.0.0.1:2999/liveclientdata"

_TRUE = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    base_url: str
    timeout_s: float
    verify_tls: bool
    refresh_s: float
    log_level: int

    @classmethod
    def from_env(cls) -> "Settings":
        level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        return cls(
            base_url=os.getenv("LOL_LIVE_BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/"),
            timeout_s=float(os.getenv("LOL_LIVE_TIMEOUT_SECONDS", "5")),
            verify_tls=os.getenv("LOL_LIVE_VERIFY_TLS", "0").strip().lower() in _TRUE,
            refresh_s=float(os.getenv("LOL_OVERLAY_REFRESH_SECONDS", "1")),
            log_level=getattr(logging, level_name, logging.INFO),
        )
