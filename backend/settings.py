import os
from pathlib import Path

# Basic settings helper to read environment configuration.

BACKEND_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_SOURCE = str(BACKEND_DIR / "data" / "travel_recommendation_api.json")


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_float(val: str | None, default: float) -> float:
    try:
        return float(val) if val is not None else default
    except ValueError:
        return default


class Settings:
    def __init__(self) -> None:
        self.TRAVEL_DATA_SOURCE: str = os.getenv("TRAVEL_DATA_SOURCE") or DEFAULT_DATA_SOURCE
        self.TRAVEL_DATA_TIMEOUT: float = _as_float(os.getenv("TRAVEL_DATA_TIMEOUT"), 10.0)
        self.TRAVEL_LOAD_ASYNC: bool = _as_bool(os.getenv("TRAVEL_LOAD_ASYNC"), True)
        self.LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").upper()
        self.PORT: int = int(_as_float(os.getenv("PORT"), 5001))


settings = Settings()
