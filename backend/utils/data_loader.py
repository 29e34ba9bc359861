# backend/utils/data_loader.py
from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from settings import settings
from .errors import DataLoadError
from .models import Dataset
from .validators import summarize, validate_dataset

logger = logging.getLogger(__name__)

def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


# --------------------------------------------------------------------------- #
# Low-level JSON I/O
# --------------------------------------------------------------------------- #

def _load_json_file(path: Path) -> Any:
    if not path.exists():
        raise DataLoadError(
            f"Missing data file: {path}. "
            "Set TRAVEL_DATA_SOURCE or verify your folder structure."
        )
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise DataLoadError(f"Could not read {path}: {e}") from e


def _load_json_url(url: str, timeout: float) -> Any:
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise DataLoadError(f"Could not fetch {url}: {e}") from e
    try:
        return resp.json()
    except ValueError as e:
        raise DataLoadError(f"Invalid JSON from {url}: {e}") from e


def fetch_document(source: str, timeout: float = 10.0) -> Dict[str, Any]:
    """
    Fetch the raw travel document from a local path or an http(s) URL and
    check its shape. Raises DataLoadError on any failure.
    """
    payload = _load_json_url(source, timeout) if _is_url(source) else _load_json_file(Path(source))
    issues = validate_dataset(payload)
    if issues:
        raise DataLoadError(f"Malformed travel data from {source}: " + "; ".join(issues[:5]))
    return payload


def load_dataset(source: str, timeout: float = 10.0) -> Dataset:
    return Dataset.from_dict(fetch_document(source, timeout=timeout))


# --------------------------------------------------------------------------- #
# DataStore: one dataset snapshot, loaded once, read-only afterwards
# --------------------------------------------------------------------------- #

class DataStore:
    """
    Holds the current Dataset snapshot.

        store = DataStore(source)
        store.load_async()      # startup, returns immediately
        data = store.dataset    # None until the load completes

    At most one load runs at a time. A failed first load leaves the store
    not-ready; a failed reload keeps the previous snapshot.
    """

    def __init__(self, source: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.source: str = source or settings.TRAVEL_DATA_SOURCE
        self.timeout: float = timeout if timeout is not None else settings.TRAVEL_DATA_TIMEOUT
        self._dataset: Optional[Dataset] = None
        self._last_error: Optional[str] = None
        self._lock = threading.Lock()
        # guards the in-flight check in load_async; _lock is held for a whole load
        self._start_lock = threading.Lock()
        self._loading: Optional[threading.Thread] = None

    @property
    def dataset(self) -> Optional[Dataset]:
        return self._dataset

    @property
    def ready(self) -> bool:
        return self._dataset is not None

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    @property
    def loading(self) -> bool:
        t = self._loading
        return t is not None and t.is_alive()

    def load(self) -> Dataset:
        """Load synchronously. Raises DataLoadError; the old snapshot survives."""
        with self._lock:
            logger.info("Loading travel data from %s", self.source)
            try:
                dataset = load_dataset(self.source, timeout=self.timeout)
            except DataLoadError as e:
                self._last_error = str(e)
                logger.error("Error loading travel data: %s", e)
                raise
            self._dataset = dataset
            self._last_error = None
            logger.info(
                "Travel data loaded: %d countries, %d beaches, %d temples",
                len(dataset.countries), len(dataset.beaches), len(dataset.temples),
            )
            return dataset

    def _load_quietly(self) -> None:
        try:
            self.load()
        except DataLoadError:
            # already logged and recorded in last_error
            pass

    def load_async(self) -> threading.Thread:
        """Start a background load unless one is already in flight."""
        with self._start_lock:
            if self.loading:
                return self._loading  # type: ignore[return-value]
            t = threading.Thread(target=self._load_quietly, name="travel-data-loader", daemon=True)
            self._loading = t
            t.start()
        return t

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until an in-flight load finishes; returns readiness."""
        t = self._loading
        if t is not None:
            t.join(timeout)
        return self.ready

    def status(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "ready": self.ready,
            "loading": self.loading,
            "source": self.source,
            "error": self._last_error,
        }
        if self._dataset is not None:
            out["counts"] = summarize(self._dataset.to_dict())
        return out


def check_source(source: Optional[str] = None) -> List[str]:
    """
    Return validation issues for the configured document without touching
    any DataStore (used by /validate). Load failures are reported as issues.
    """
    src = source or settings.TRAVEL_DATA_SOURCE
    try:
        payload = (
            _load_json_url(src, settings.TRAVEL_DATA_TIMEOUT)
            if _is_url(src)
            else _load_json_file(Path(src))
        )
    except DataLoadError as e:
        return [str(e)]
    return validate_dataset(payload)


# --------------------------------------------------------------------------- #
# Smoke test
# --------------------------------------------------------------------------- #

if __name__ == "__main__":
    store = DataStore()
    print(f"TRAVEL_DATA_SOURCE = {store.source}")
    try:
        data = store.load()
        print(f"Countries: {len(data.countries)}")
        print(f"Beaches: {len(data.beaches)}")
        print(f"Temples: {len(data.temples)}")
        print("OK")
    except DataLoadError as e:
        print("Smoke test failed:", e)
