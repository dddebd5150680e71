import re
from datetime import time
from typing import Optional

from salon_agenda.scheduling.periods import SESSION_STATUSES

_STRICT_HHMM = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def parse_wall_clock(value: str, field: str = "time") -> time:
    """Strict 24h HH:MM -> datetime.time, as typed into the dashboard."""
    value = (value or "").strip()
    match = _STRICT_HHMM.match(value)
    if not match:
        raise ValueError(f"Invalid {field} '{value}'. Use HH:MM (e.g. 09:00)")
    return time(int(match.group(1)), int(match.group(2)))


def validate_time_range(start: time, end: time) -> None:
    # No overnight blocks
    if end <= start:
        raise ValueError("end_time must be after start_time")


def validate_block_shape(is_full_day: bool, start: Optional[time], end: Optional[time]) -> None:
    if is_full_day:
        if start is not None or end is not None:
            raise ValueError("a full-day block has no start_time/end_time")
        return
    if start is None or end is None:
        raise ValueError("a partial block needs both start_time and end_time")
    validate_time_range(start, end)


def validate_status(status: str) -> str:
    if status not in SESSION_STATUSES:
        raise ValueError(f"Unknown status '{status}'")
    return status
