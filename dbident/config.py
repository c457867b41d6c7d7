from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    # -----------------
    # Logging
    # -----------------
    log_level: str = os.getenv("DBIDENT_LOG_LEVEL", "WARNING").upper()
    log_format: str = os.getenv("DBIDENT_LOG_FORMAT", "console").lower()  # console|json


settings = Settings()


def normalize_log_format(fmt: str) -> str:
    """Normalize log format.

    Accept a couple of aliases so environment config is forgiving.
    """

    f = (fmt or "").strip().lower()
    if f in ("json", "structured"):
        return "json"
    return "console"
