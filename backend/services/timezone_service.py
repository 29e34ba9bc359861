# backend/services/timezone_service.py
from __future__ import annotations

import logging
from datetime import datetime, timezone as dt_timezone
from typing import Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from utils.errors import InvalidTimezone

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"

COUNTRY_TIMEZONES: Dict[str, str] = {
    "Australia": "Australia/Sydney",
    "Japan": "Asia/Tokyo",
    "Brazil": "America/Sao_Paulo",
    "Cambodia": "Asia/Phnom_Penh",
    "India": "Asia/Kolkata",
    "French Polynesia": "Pacific/Tahiti",
}


# Fixed English names; strftime's %a/%b follow LC_TIME
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def country_timezone(country_name: str) -> str:
    """IANA zone for a known country name (exact match), else UTC."""
    return COUNTRY_TIMEZONES.get(country_name, DEFAULT_TIMEZONE)


def _zone(tz_name: str) -> ZoneInfo:
    if not tz_name or not isinstance(tz_name, str):
        raise InvalidTimezone(f"Invalid timezone: {tz_name!r}")
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimezone(f"Invalid timezone: {tz_name!r}") from e


def format_local_time(moment: datetime) -> str:
    """en-US style, e.g. 'Mon, Oct 19, 2026, 3:04:05 PM'."""
    hour = moment.hour % 12 or 12
    return (
        f"{_WEEKDAYS[moment.weekday()]}, {_MONTHS[moment.month - 1]} {moment.day}, {moment.year}, "
        f"{hour}:{moment:%M}:{moment:%S} {'AM' if moment.hour < 12 else 'PM'}"
    )


def local_time(tz_name: str, now: Optional[datetime] = None) -> str:
    """
    Current time rendered in `tz_name`. Raises InvalidTimezone for unknown
    or malformed zone ids. `now` must be timezone-aware when given.
    """
    zone = _zone(tz_name)
    moment = (now or datetime.now(dt_timezone.utc)).astimezone(zone)
    return format_local_time(moment)


def country_local_time(country_name: str, now: Optional[datetime] = None) -> Optional[str]:
    """Local time annotation for a country card, or None if it can't be computed."""
    tz_name = country_timezone(country_name)
    try:
        return local_time(tz_name, now=now)
    except InvalidTimezone as e:
        logger.error("Error getting time: %s", e)
        return None
