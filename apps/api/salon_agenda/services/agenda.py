"""
Agenda snapshots

Reads one professional's day from the database and turns the rows into the
plain records the slot engine consumes. The engine itself never touches the
database; every call here loads a fresh snapshot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, time
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from salon_agenda.models.blocked_slot import BlockedSlot
from salon_agenda.models.custom_slot import CustomSlot
from salon_agenda.models.day_config import ProfessionalDayConfig
from salon_agenda.models.session import SessionStatus, TherapySession
from salon_agenda.scheduling.periods import OCCUPYING_STATUSES
from salon_agenda.scheduling.slot_engine import BlockEntry, SessionEntry, compute_free_slots
from salon_agenda.scheduling.week import combine_day_times, week_dates

logger = logging.getLogger(__name__)


def _hhmm(t: Optional[time]) -> Optional[str]:
    return t.strftime("%H:%M") if t is not None else None


@dataclass(frozen=True)
class DaySnapshot:
    day: date
    sessions: Tuple[SessionEntry, ...]
    blocks: Tuple[BlockEntry, ...]
    custom_slots: Tuple[str, ...]
    day_start_override: Optional[str]


def load_day_snapshot(db: Session, professional_id: UUID, day: date) -> DaySnapshot:
    occupying = [SessionStatus(s) for s in OCCUPYING_STATUSES]
    session_rows = db.execute(
        select(TherapySession)
        .where(
            and_(
                TherapySession.professional_id == professional_id,
                TherapySession.session_date == day,
                TherapySession.status.in_(occupying),
            )
        )
        .order_by(TherapySession.session_time)
    ).scalars().all()

    block_rows = db.execute(
        select(BlockedSlot).where(
            and_(BlockedSlot.professional_id == professional_id, BlockedSlot.block_date == day)
        )
    ).scalars().all()

    custom_rows = db.execute(
        select(CustomSlot.slot_time)
        .where(and_(CustomSlot.professional_id == professional_id, CustomSlot.slot_date == day))
        .order_by(CustomSlot.slot_time)
    ).scalars().all()

    config = db.execute(
        select(ProfessionalDayConfig).where(
            and_(
                ProfessionalDayConfig.professional_id == professional_id,
                ProfessionalDayConfig.config_date == day,
            )
        )
    ).scalars().first()

    return DaySnapshot(
        day=day,
        sessions=tuple(
            SessionEntry(
                session_date=s.session_date,
                session_time=_hhmm(s.session_time),
                duration_code=s.duration_code,
                status=s.status.value,
                session_id=s.session_id,
            )
            for s in session_rows
        ),
        blocks=tuple(
            BlockEntry(
                block_date=b.block_date,
                is_full_day=bool(b.is_full_day),
                start_time=_hhmm(b.start_time),
                end_time=_hhmm(b.end_time),
            )
            for b in block_rows
        ),
        custom_slots=tuple(_hhmm(t) for t in custom_rows),
        day_start_override=_hhmm(config.custom_start_time) if config else None,
    )


def free_slots_for_snapshot(snapshot: DaySnapshot, duration_minutes: int, granularity_minutes: int) -> List[str]:
    return compute_free_slots(
        snapshot.day,
        snapshot.sessions,
        duration_minutes,
        granularity_minutes=granularity_minutes,
        blocks=snapshot.blocks,
        custom_slots=snapshot.custom_slots,
        day_start_override=snapshot.day_start_override,
    )


def free_slots_for_day(
    db: Session, professional_id: UUID, day: date, duration_minutes: int, granularity_minutes: int
) -> List[str]:
    snapshot = load_day_snapshot(db, professional_id, day)
    slots = free_slots_for_snapshot(snapshot, duration_minutes, granularity_minutes)
    logger.debug("professional=%s day=%s free=%d", professional_id, day, len(slots))
    return slots


def week_overview(
    db: Session, professional_id: UUID, week_start: date, duration_minutes: int, granularity_minutes: int
) -> List[dict]:
    """Monday..Saturday: free slots plus the combined booked/free column per day."""
    days = []
    for day in week_dates(week_start):
        snapshot = load_day_snapshot(db, professional_id, day)
        free = free_slots_for_snapshot(snapshot, duration_minutes, granularity_minutes)
        days.append(
            {
                "date": day,
                "day_start": snapshot.day_start_override,
                "free_slots": free,
                "times": combine_day_times(free, snapshot.sessions),
            }
        )
    return days
