from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


def _flag(name: str, default: str = "") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    log_level: str = os.getenv("KBO_LOG_LEVEL", "INFO")
    log_json: bool = _flag("KBO_LOG_JSON")


settings = Settings()
