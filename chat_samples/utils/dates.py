# Role: Display formatting for dates coming from Chat date pickers (milliseconds since epoch).

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from chat_samples.models.errors import MalformedEventError

# Fixed English names: output must not depend on the server's locale.
_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_birthdate(millis: Optional[int]) -> str:
    # Key line: DATE_ONLY pickers send midnight UTC of the chosen day, so format in UTC
    # (a local timezone west of UTC would show the previous day).
    if millis is None:
        return ""
    try:
        d = datetime.fromtimestamp(int(millis) / 1000, tz=timezone.utc).date()
    except (OverflowError, OSError, ValueError) as e:
        raise MalformedEventError(f"Birthdate out of range: {millis!r}") from e
    return f"{_MONTHS[d.month - 1]} {d.day}, {d.year}"
