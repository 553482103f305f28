"""
Configuration helpers for the mock API.

Routers/services read paths and flags through get_settings() instead of
touching os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    host: str
    port: int
    log_level: str
    data_dir: Path
    cars_file: Path
    bookings_file: Path
    strict_storage: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    data_dir = Path(os.getenv("MOCK_API_DATA_DIR") or ROOT_DIR / "data")
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        data_dir=data_dir,
        cars_file=Path(os.getenv("MOCK_API_CARS_FILE") or data_dir / "cars.json"),
        bookings_file=Path(os.getenv("MOCK_API_BOOKINGS_FILE") or data_dir / "bookings.json"),
        strict_storage=_bool(os.getenv("MOCK_API_STRICT_STORAGE"), False),
    )
