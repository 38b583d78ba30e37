"""Formatting of the current time, optionally at a fixed UTC offset."""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timedelta, timezone

log = logging.getLogger(__name__)

_DIRECTIVE = re.compile(r"%.")
_EXPANSIONS = {"%r": "%I:%M:%S %p", "%T": "%H:%M:%S"}
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf|infinity|nan)", re.I)


class InvalidOffsetError(ValueError):
    """Raised when a UTC offset is unparsable or not within ±24 hours."""


def _expand(time_format: str) -> str:
    return _DIRECTIVE.sub(lambda m: _EXPANSIONS.get(m.group(), m.group()), time_format)


def format_time(time_format: str, moment: datetime) -> str:
    """Format ``moment`` with a strftime-style format string."""
    return moment.strftime(_expand(time_format))


def _parse_offset_hours(utc_time_offset: str) -> float:
    if not _NUMBER.fullmatch(utc_time_offset):
        raise InvalidOffsetError("Invalid timezone offset.")
    hours = float(utc_time_offset)
    if math.isnan(hours) or not -24 < hours < 24:
        raise InvalidOffsetError("Invalid timezone offset.")
    return hours


def create_offset_time_string(
    utc_time: datetime, utc_time_offset: str, time_format: str
) -> str:
    """Format ``utc_time`` shifted by an offset given in (possibly fractional) hours.

    Raises InvalidOffsetError when the offset cannot be parsed or lies
    outside the open range (-24, 24).
    """
    hours = _parse_offset_hours(utc_time_offset)
    offset = timezone(timedelta(seconds=int(hours * 3600)))
    if utc_time.tzinfo is None:
        utc_time = utc_time.replace(tzinfo=timezone.utc)
    target_time = utc_time.astimezone(offset)
    log.debug("Time in target timezone now is %s", target_time)
    return format_time(time_format, target_time)


def current_time_string(time_format: str = "%T", utc_time_offset: str = "local") -> str:
    """Return the current time, in local time or at the given UTC offset.

    An invalid offset falls back to local time with a warning.
    """
    if utc_time_offset != "local":
        try:
            return create_offset_time_string(
                datetime.now(timezone.utc), utc_time_offset, time_format
            )
        except InvalidOffsetError:
            log.warning('Invalid utc_time_offset configuration provided! Falling back to "local".')
    return format_time(time_format, datetime.now().astimezone())