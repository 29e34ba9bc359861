# backend/utils/errors.py
from __future__ import annotations


class TravelSearchError(Exception):
    """Base class for every error the finder reports to its callers."""

    code = "travel_search_error"
    message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class EmptyQuery(TravelSearchError):
    code = "empty_query"
    message = "Please enter a valid search query."


class DataNotReady(TravelSearchError):
    code = "data_not_ready"
    message = "Data is still loading. Please try again."


class InvalidTimezone(TravelSearchError):
    code = "invalid_timezone"
    message = "Unknown timezone."


class DataLoadError(TravelSearchError):
    """Missing/unreachable source, invalid JSON or a malformed document."""

    code = "data_load_error"
    message = "Travel data could not be loaded."
