"""Helpers for the current moment in time and for daily clock times.

Clock times are kept in records as "HH:MM" strings."""

import re
from datetime import datetime, time, timezone
from functools import partial
from typing import Optional


tz_aware_now = partial(datetime.now, tz=timezone.utc)

CLOCK_TIME = re.compile(r'^([01]?[0-9]|2[0-3]):([0-5][0-9])$')


def parse_clock(value: Optional[str]) -> Optional[time]:
    """Turn an "HH:MM" string into a time of day, or None if it is malformed."""
    if not isinstance(value, str):
        return None
    match = CLOCK_TIME.match(value.strip())
    if match is None:
        return None
    return time(int(match.group(1)), int(match.group(2)))
