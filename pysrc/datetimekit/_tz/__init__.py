from .store import (
    ABBREVIATIONS,
    TimeZoneNotFoundError,
    find_abbreviation,
    find_tz,
    get_system_tz,
    get_tz,
    reset_system_tz,
)

__all__ = [
    "ABBREVIATIONS",
    "TimeZoneNotFoundError",
    "find_abbreviation",
    "find_tz",
    "get_system_tz",
    "get_tz",
    "reset_system_tz",
]
