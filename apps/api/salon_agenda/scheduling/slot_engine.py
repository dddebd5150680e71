"""
Free-slot engine

Computes the bookable start times (HH:MM) for one professional on one day,
given a snapshot of that day:
- sessions (only scheduled/done/confirmed ones occupy time)
- blocks (full-day closes the day, partial blocks occupy time)
- custom slots (operator-declared start times)
- an optional day-start override

The engine is pure: no I/O, no caches, no shared state. Callers load a fresh
snapshot per day and may run several days concurrently.

Algorithm:
    1. Sunday or a full-day block -> nothing to offer
    2. Resolve working hours (override, Saturday close, morning block push)
    3. Build occupancy from partial blocks and sessions
    4. Anchor = earliest occupancy start or non-conflicting custom slot
    5. Anchor after opening: fill backwards from the anchor, then forwards
       through the gaps after it. Otherwise sweep the gaps from opening.
    6. Merge custom slots that clear every occupancy by the granularity
    7. Deduplicate and sort
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from functools import reduce
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from salon_agenda.scheduling.periods import (
    OCCUPYING_STATUSES,
    minutes_for_duration_code,
    minutes_to_hhmm,
    parse_hhmm,
)

logger = logging.getLogger(__name__)


# ========== Working hours ==========
DEFAULT_DAY_START_MINUTES = 8 * 60  # 08:00
WEEKDAY_DAY_END_MINUTES = 20 * 60 + 10  # 20:10
SATURDAY_DAY_END_MINUTES = 16 * 60 + 10  # 16:10
DEFAULT_GRANULARITY_MINUTES = 15
BLOCK_PUSH_WINDOW_MINUTES = 120
MINUTES_PER_DAY = 24 * 60


# ========== Snapshot records ==========
@dataclass(frozen=True)
class SessionEntry:
    session_date: Union[date, str, None]
    session_time: object  # "HH:MM", "HH:MM:SS" or datetime.time
    duration_code: Optional[str]
    status: str
    session_id: object = None


@dataclass(frozen=True)
class BlockEntry:
    block_date: Union[date, str, None]
    is_full_day: bool = False
    start_time: object = None
    end_time: object = None


@dataclass(frozen=True)
class Occupancy:
    start: int
    end: int
    kind: str  # "session" or "block"


# ========== Helper Functions ==========
def _to_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _overlaps(a_start_m: int, a_end_m: int, b_start_m: int, b_end_m: int) -> bool:
    return a_start_m < b_end_m and b_start_m < a_end_m


def _conflicts(start_m: int, duration: int, occupancy: Sequence[Occupancy]) -> bool:
    return any(_overlaps(start_m, start_m + duration, o.start, o.end) for o in occupancy)


def _day_end_for(day: date) -> int:
    return SATURDAY_DAY_END_MINUTES if day.weekday() == 5 else WEEKDAY_DAY_END_MINUTES


def _session_occupancy(sessions: Iterable[SessionEntry], day: date) -> Tuple[Occupancy, ...]:
    result = []
    for s in sessions:
        if s.status not in OCCUPYING_STATUSES or _to_date(s.session_date) != day:
            continue
        start = parse_hhmm(s.session_time)
        if start is None or not s.duration_code:
            continue
        end = start + minutes_for_duration_code(s.duration_code)
        if end > start:
            result.append(Occupancy(start, end, "session"))
    return tuple(result)


def _block_occupancy(blocks: Iterable[BlockEntry]) -> Tuple[Occupancy, ...]:
    result = []
    for b in blocks:
        if b.is_full_day:
            continue
        start, end = parse_hhmm(b.start_time), parse_hhmm(b.end_time)
        if start is not None and end is not None and end > start:
            result.append(Occupancy(start, end, "block"))
    return tuple(result)


def _resolve_day_start(override, partial_blocks: Sequence[Occupancy]) -> int:
    day_start = DEFAULT_DAY_START_MINUTES
    override_m = parse_hhmm(override) if override else None
    if override_m is not None and 0 <= override_m < MINUTES_PER_DAY:
        day_start = override_m

    # A block only delays the opening when it ends within two hours of it.
    # The older booking screen instead opened the day at the latest end of any
    # block, so an evening block closed the whole morning; that rule is not used.
    pushing_ends = [
        b.end for b in partial_blocks
        if day_start < b.end < day_start + BLOCK_PUSH_WINDOW_MINUTES
    ]
    return max(pushing_ends + [day_start])


def _find_anchor(
    occupancy: Sequence[Occupancy], custom_minutes: Sequence[int], duration: int
) -> Optional[int]:
    marked = [o.start for o in occupancy]
    marked += [t for t in custom_minutes if not _conflicts(t, duration, occupancy)]
    return min(marked) if marked else None


# ========== Fill strategies ==========
def _fill_before(
    anchor: int,
    day_start: int,
    day_end: int,
    duration: int,
    granularity: int,
    occupancy: Sequence[Occupancy],
) -> Tuple[int, ...]:
    """Pack slots backwards from the anchor, closest first, down to day_start."""
    step = duration + granularity
    candidates = range(anchor - granularity - duration, day_start - 1, -step)

    def accept(taken: Tuple[int, ...], candidate: int) -> Tuple[int, ...]:
        # Slots end by closing time whatever the anchor
        if candidate + duration > day_end:
            return taken
        if _conflicts(candidate, duration, occupancy):
            return taken
        if any(_overlaps(candidate, candidate + duration, t, t + duration) for t in taken):
            return taken
        return taken + (candidate,)

    return reduce(accept, candidates, ())


def _fill_interval(
    window_start: int,
    window_end: int,
    day_start: int,
    duration: int,
    granularity: int,
    occupancy: Sequence[Occupancy],
) -> Tuple[int, ...]:
    """Sweep forwards through one window; a slot must end by window_end."""
    step = duration + granularity
    candidates = range(max(window_start, day_start), window_end - duration + 1, step)
    return tuple(c for c in candidates if not _conflicts(c, duration, occupancy))


def _windows_after_anchor(
    anchor_end: int, occupancy: Sequence[Occupancy], granularity: int, day_end: int
) -> Tuple[Tuple[int, int], ...]:
    following = [o for o in occupancy if o.start >= anchor_end]

    def advance(state, occ: Occupancy):
        windows, last_end = state
        if occ.start >= last_end + granularity:
            windows = windows + ((last_end + granularity, occ.start - granularity),)
        return windows, max(last_end, occ.end)

    windows, last_end = reduce(advance, following, ((), anchor_end))
    if last_end < day_end:
        windows = windows + ((last_end + granularity, day_end),)
    return windows


def _windows_from_opening(
    occupancy: Sequence[Occupancy], day_start: int, day_end: int, granularity: int
) -> Tuple[Tuple[int, int], ...]:
    if not occupancy:
        return ((day_start, day_end),)

    leading = ()
    if occupancy[0].start >= day_start + granularity:
        leading = ((day_start, occupancy[0].start - granularity),)

    gaps = tuple(
        (current.end + granularity, following.start - granularity)
        for current, following in zip(occupancy, occupancy[1:])
        if following.start >= current.end + granularity
    )

    trailing = ()
    if occupancy[-1].end < day_end:
        trailing = ((occupancy[-1].end + granularity, day_end),)

    return leading + gaps + trailing


def _custom_slot_fits(
    t: int, duration: int, day_start: int, day_end: int, granularity: int, occupancy: Sequence[Occupancy]
) -> bool:
    end = t + duration
    if t < day_start or end > day_end:
        return False
    # Custom slots keep a granularity-wide buffer on both sides of every occupancy.
    return not any(t < o.end + granularity and end > o.start - granularity for o in occupancy)


# ========== core ==========
def compute_free_slots(
    target_date,
    sessions: Iterable[SessionEntry],
    duration_minutes: int,
    granularity_minutes: int = DEFAULT_GRANULARITY_MINUTES,
    blocks: Iterable[BlockEntry] = (),
    custom_slots: Iterable[object] = (),
    day_start_override=None,
) -> List[str]:
    """
    Free start times for a session of `duration_minutes` on `target_date`.

    Args:
        target_date: date or "YYYY-MM-DD"; anything else yields []
        sessions: the day's sessions (filtered here by date and status)
        duration_minutes: requested session length, > 0
        granularity_minutes: gap kept between consecutive occupied spans
        blocks: the day's blocks
        custom_slots: operator-declared start times ("HH:MM"); malformed ones are ignored
        day_start_override: "HH:MM" replacing the default 08:00 opening

    Returns:
        list[str]: ascending, unique "HH:MM" strings
    """
    day = _to_date(target_date)
    if day is None:
        return []

    if day.weekday() == 6:
        logger.debug("%s is a Sunday, agenda closed", day)
        return []

    if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int) or duration_minutes <= 0:
        logger.warning("Invalid duration %r for %s, no slots computed", duration_minutes, day)
        return []
    if isinstance(granularity_minutes, bool) or not isinstance(granularity_minutes, int) or granularity_minutes < 0:
        logger.warning("Invalid granularity %r for %s, no slots computed", granularity_minutes, day)
        return []

    day_blocks = [b for b in blocks if _to_date(b.block_date) == day]
    if any(b.is_full_day for b in day_blocks):
        logger.debug("%s has a full-day block", day)
        return []

    duration, granularity = duration_minutes, granularity_minutes
    partial_blocks = _block_occupancy(day_blocks)
    day_start = _resolve_day_start(day_start_override, partial_blocks)
    day_end = _day_end_for(day)

    # Sessions first so a session wins a tie on start time.
    occupancy = tuple(
        sorted(_session_occupancy(sessions, day) + partial_blocks, key=lambda o: o.start)
    )
    custom_minutes = sorted({m for m in map(parse_hhmm, custom_slots) if m is not None})

    anchor = _find_anchor(occupancy, custom_minutes, duration)

    if anchor is not None and anchor > day_start:
        backward = _fill_before(anchor, day_start, day_end, duration, granularity, occupancy)
        anchor_occupancy = next((o for o in occupancy if o.start == anchor), None)
        anchor_end = anchor_occupancy.end if anchor_occupancy else anchor + duration
        windows = _windows_after_anchor(anchor_end, occupancy, granularity, day_end)
    else:
        backward = ()
        windows = _windows_from_opening(occupancy, day_start, day_end, granularity)

    forward = tuple(
        slot
        for window_start, window_end in windows
        for slot in _fill_interval(
            window_start, min(window_end, day_end), day_start, duration, granularity, occupancy
        )
    )
    custom = tuple(
        t for t in custom_minutes
        if _custom_slot_fits(t, duration, day_start, day_end, granularity, occupancy)
    )

    return [minutes_to_hhmm(m) for m in sorted(set(backward + forward + custom))]
