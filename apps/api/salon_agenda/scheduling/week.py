from datetime import date, timedelta
from typing import Dict, Iterable, List

from salon_agenda.scheduling.periods import parse_hhmm, minutes_to_hhmm
from salon_agenda.scheduling.slot_engine import SessionEntry

OPEN_DAYS_PER_WEEK = 6  # Monday..Saturday


def week_start_for(day: date) -> date:
    """Monday of the week containing `day` (Sunday belongs to the week before)."""
    return day - timedelta(days=day.weekday())


def week_dates(week_start: date) -> List[date]:
    return [week_start + timedelta(days=i) for i in range(OPEN_DAYS_PER_WEEK)]


def combine_day_times(free_slots: Iterable[str], sessions: Iterable[SessionEntry]) -> List[Dict]:
    """
    Merge booked sessions and free times into one grid column.

    A free time equal to a booked session's time is listed once, as booked.
    Sessions without a valid time are left out.
    """
    booked = []
    for s in sessions:
        minutes = parse_hhmm(s.session_time)
        if minutes is None:
            continue
        session_id = str(s.session_id) if s.session_id is not None else None
        booked.append({"minutes": minutes, "kind": "booked", "session_id": session_id})

    booked_minutes = {b["minutes"] for b in booked}
    free = [
        {"minutes": m, "kind": "free", "session_id": None}
        for m in {parse_hhmm(t) for t in free_slots} - booked_minutes
        if m is not None
    ]

    entries = sorted(booked + free, key=lambda e: (e["minutes"], e["kind"] != "booked"))
    return [
        {"time": minutes_to_hhmm(e["minutes"]), "kind": e["kind"], "session_id": e["session_id"]}
        for e in entries
    ]
