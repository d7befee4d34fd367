"""Convert Apache ``%t`` timestamps to Unix epoch seconds.

logtime format: ``day/month/year:hour:minute:second zone``

    day    = 2*digit
    month  = 3*letter
    year   = 4*digit
    hour, minute, second = 2*digit
    zone   = ("+" | "-") 4*digit

e.g. ``04/Apr/2012:10:37:29 -0500``
"""
from __future__ import annotations

import calendar
import re
from datetime import datetime

SENTINEL = "-"

_CALENDAR_FORMAT = "%d/%b/%Y:%H:%M:%S"
# The calendar part is fixed width; the zone follows at index 20.
_CALENDAR_WIDTH = 20
_ZONE_RE = re.compile(r" ([+-])(\d{2})(\d{2})")


def epoch_seconds(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    offset_seconds: int,
) -> int:
    """Epoch seconds of a wall-clock time observed at a UTC offset.

    Pure arithmetic, no host timezone or DST involved. ``offset_seconds`` is
    positive east of UTC, as in ``+0200``.
    """
    naive = calendar.timegm((year, month, day, hour, minute, second, 0, 0, 0))
    return naive - offset_seconds


def parse_zone_offset(zone: str) -> int | None:
    """Signed offset in seconds from a `` ±HHMM`` suffix, or None."""
    m = _ZONE_RE.fullmatch(zone)
    if not m:
        return None
    sign, hours, minutes = m.groups()
    offset = int(hours) * 3600 + int(minutes) * 60
    return -offset if sign == "-" else offset


def logtime_to_epoch(logtime: str) -> str:
    """Return the epoch-seconds string for *logtime*, or ``"-"`` if unparsable."""
    try:
        moment = datetime.strptime(logtime[:_CALENDAR_WIDTH], _CALENDAR_FORMAT)
    except ValueError:
        return SENTINEL

    offset = parse_zone_offset(logtime[_CALENDAR_WIDTH:])
    if offset is None:
        return SENTINEL

    try:
        epoch = epoch_seconds(
            moment.year, moment.month, moment.day,
            moment.hour, moment.minute, moment.second,
            offset,
        )
    except (OverflowError, ValueError):
        return SENTINEL
    return str(epoch)
