import re
from typing import Optional

DURATION_CODES = [
    {"value": "30min", "label": "30 minutes", "minutes": 30},
    {"value": "1h", "label": "1 hour", "minutes": 60},
    {"value": "1h30", "label": "1h30", "minutes": 90},
    {"value": "2h", "label": "2 hours", "minutes": 120},
]

DEFAULT_DURATION_MINUTES = 60

SESSION_STATUSES = (
    "scheduled",
    "done",
    "confirmed",
    "cancelled_by_client",
    "cancelled_by_professional",
)

# Only these statuses take time away from the agenda.
OCCUPYING_STATUSES = frozenset({"scheduled", "done", "confirmed"})

_DURATION_LOOKUP = {d["value"]: d["minutes"] for d in DURATION_CODES}
_FREE_FORM_DURATION = re.compile(r"(\d+)h(\d+)?")
_HHMM = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def parse_hhmm(value) -> Optional[int]:
    """Convert HH:MM (or HH:MM:SS, or a time object) to minutes since midnight.

    Returns None for anything that is not a valid wall-clock time.
    """
    if value is None:
        return None
    if hasattr(value, "hour") and hasattr(value, "minute"):
        return int(value.hour) * 60 + int(value.minute)
    match = _HHMM.match(str(value).strip())
    if not match:
        return None
    hh, mm = int(match.group(1)), int(match.group(2))
    if hh >= 24 or mm >= 60:
        return None
    return hh * 60 + mm


def minutes_to_hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def minutes_for_duration_code(code: Optional[str]) -> int:
    """
    Resolve a duration code ("30min", "1h", "1h30", "2h", "<N>h<M>") to minutes.
    Unknown or empty codes fall back to one hour.
    """
    if not code:
        return DEFAULT_DURATION_MINUTES
    if code in _DURATION_LOOKUP:
        return _DURATION_LOOKUP[code]
    match = _FREE_FORM_DURATION.search(code)
    if match:
        hours = int(match.group(1))
        minutes = int(match.group(2)) if match.group(2) else 0
        return hours * 60 + minutes
    return DEFAULT_DURATION_MINUTES
