# honeyscan/config.py
# Purpose: Environment-driven settings (.env via python-dotenv) + logging setup.
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.honeypot.is/v2/IsHoneypot"
DEFAULT_TIMEOUT = 10.0
DEFAULT_DATA_DIR = "~/.honeyscan"

logger = logging.getLogger(__name__)

_FALSEY = {"0", "false", "no", "off", ""}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSEY


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return max(0.1, float(raw))
    except ValueError:
        logger.warning("[CONFIG] %s=%r is not a number, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    api_timeout: float = DEFAULT_TIMEOUT
    fallback_enabled: bool = True
    data_dir: Path = Path(DEFAULT_DATA_DIR).expanduser()
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv()
        return cls(
            api_url=(os.getenv("HONEYPOT_API_URL") or DEFAULT_API_URL).strip(),
            api_timeout=_env_float("HONEYPOT_API_TIMEOUT", DEFAULT_TIMEOUT),
            fallback_enabled=_env_flag("HONEYPOT_FALLBACK", True),
            data_dir=Path(os.getenv("HONEYSCAN_DATA_DIR") or DEFAULT_DATA_DIR).expanduser(),
            log_level=(os.getenv("HONEYSCAN_LOG_LEVEL") or "INFO").strip().upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


__all__ = ["Settings", "configure_logging", "DEFAULT_API_URL", "DEFAULT_TIMEOUT"]
