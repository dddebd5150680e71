from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from salon_agenda.core.config import settings
from salon_agenda.core.database import get_db
from salon_agenda.routers.professionals import require_professional
from salon_agenda.scheduling.periods import minutes_for_duration_code
from salon_agenda.scheduling.week import week_start_for
from salon_agenda.schemas.agenda import FreeSlotsOut, WeekOut
from salon_agenda.services.agenda import free_slots_for_day, week_overview

router = APIRouter()


def _resolve_duration(duration_code: Optional[str], duration_minutes: Optional[int]) -> int:
    # An explicit minute count wins over the code
    if duration_minutes is not None:
        return duration_minutes
    return minutes_for_duration_code(duration_code or settings.default_duration_code)


@router.get("/professionals/{professional_id}/agenda/free-slots", response_model=FreeSlotsOut)
def get_free_slots(
    professional_id: UUID,
    day: date = Query(..., alias="date"),
    duration_code: Optional[str] = Query(None),
    duration_minutes: Optional[int] = Query(None, gt=0),
    granularity: Optional[int] = Query(None, ge=0),
    db: Session = Depends(get_db),
):
    require_professional(db, professional_id)
    duration = _resolve_duration(duration_code, duration_minutes)
    gap = settings.free_slot_interval_minutes if granularity is None else granularity

    return {
        "professional_id": str(professional_id),
        "date": day,
        "duration_minutes": duration,
        "granularity_minutes": gap,
        "free_slots": free_slots_for_day(db, professional_id, day, duration, gap),
    }


@router.get("/professionals/{professional_id}/agenda/week", response_model=WeekOut)
def get_week(
    professional_id: UUID,
    start: Optional[date] = Query(None),
    duration_code: Optional[str] = Query(None),
    duration_minutes: Optional[int] = Query(None, gt=0),
    granularity: Optional[int] = Query(None, ge=0),
    db: Session = Depends(get_db),
):
    require_professional(db, professional_id)
    duration = _resolve_duration(duration_code, duration_minutes)
    gap = settings.free_slot_interval_minutes if granularity is None else granularity
    monday = week_start_for(start or date.today())

    return {
        "professional_id": str(professional_id),
        "week_start": monday,
        "duration_minutes": duration,
        "days": week_overview(db, professional_id, monday, duration, gap),
    }
