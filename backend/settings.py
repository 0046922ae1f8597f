import os
from pathlib import Path
from typing import List

# Basic settings helper to read environment configuration.

BACKEND_ROOT = Path(__file__).resolve().parent


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_list(val: str | None, default: List[str]) -> List[str]:
    if not val:
        return default
    return [item.strip() for item in val.split(",") if item.strip()]


class Settings:
    def __init__(self) -> None:
        self.DATABASE_URL: str = (
            os.getenv("DATABASE_URL", "").strip() or f"sqlite:///{BACKEND_ROOT / 'library.db'}"
        )
        self.DATABASE_ECHO: bool = _as_bool(os.getenv("DATABASE_ECHO"), False)
        self.CORS_ORIGINS: List[str] = _as_list(os.getenv("CORS_ORIGINS"), ["*"])
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
