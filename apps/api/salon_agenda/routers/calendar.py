import logging
from datetime import date, time
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import and_, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from salon_agenda.core.database import get_db
from salon_agenda.models.blocked_slot import BlockedSlot
from salon_agenda.models.custom_slot import CustomSlot
from salon_agenda.models.day_config import ProfessionalDayConfig
from salon_agenda.routers.professionals import require_professional
from salon_agenda.schemas.calendar import (
    BlockCreate,
    BlockOut,
    CustomSlotCreate,
    DayStartOut,
    DayStartUpdate,
)
from salon_agenda.services.validators import parse_wall_clock, validate_block_shape

logger = logging.getLogger(__name__)

router = APIRouter()


def _hhmm(t) -> Optional[str]:
    return t.strftime("%H:%M") if t is not None else None


def _block_out(b: BlockedSlot) -> dict:
    return {
        "block_id": str(b.block_id),
        "block_date": b.block_date,
        "is_full_day": bool(b.is_full_day),
        "start_time": _hhmm(b.start_time),
        "end_time": _hhmm(b.end_time),
        "reason": b.reason,
    }


# ----------------------------
# Custom slots
# ----------------------------
DUPLICATE_SLOT_DETAIL = "This time is already in the agenda"


def _custom_slot_exists(db: Session, professional_id: UUID, slot_date: date, slot_time: time) -> bool:
    return db.execute(
        select(CustomSlot.custom_slot_id).where(
            and_(
                CustomSlot.professional_id == professional_id,
                CustomSlot.slot_date == slot_date,
                CustomSlot.slot_time == slot_time,
            )
        )
    ).first() is not None


@router.get("/professionals/{professional_id}/custom-slots", response_model=list[str])
def list_custom_slots(
    professional_id: UUID,
    slot_date: date = Query(...),
    db: Session = Depends(get_db),
):
    require_professional(db, professional_id)
    times = db.execute(
        select(CustomSlot.slot_time)
        .where(and_(CustomSlot.professional_id == professional_id, CustomSlot.slot_date == slot_date))
        .order_by(CustomSlot.slot_time)
    ).scalars().all()
    return [_hhmm(t) for t in times]


@router.post("/professionals/{professional_id}/custom-slots", status_code=201)
def add_custom_slot(professional_id: UUID, payload: CustomSlotCreate, db: Session = Depends(get_db)):
    require_professional(db, professional_id)
    try:
        slot_time = parse_wall_clock(payload.slot_time, "slot_time")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if _custom_slot_exists(db, professional_id, payload.slot_date, slot_time):
        raise HTTPException(status_code=409, detail=DUPLICATE_SLOT_DETAIL)

    db.add(CustomSlot(professional_id=professional_id, slot_date=payload.slot_date, slot_time=slot_time))
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent insert of the same slot (uq_custom_slot)
        db.rollback()
        raise HTTPException(status_code=409, detail=DUPLICATE_SLOT_DETAIL)
    logger.info("Custom slot %s %s added for %s", payload.slot_date, _hhmm(slot_time), professional_id)
    return {"slot_date": payload.slot_date, "slot_time": _hhmm(slot_time)}


@router.delete("/professionals/{professional_id}/custom-slots")
def remove_custom_slot(
    professional_id: UUID,
    slot_date: date = Query(...),
    slot_time: str = Query(...),
    db: Session = Depends(get_db),
):
    require_professional(db, professional_id)
    try:
        parsed = parse_wall_clock(slot_time, "slot_time")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = db.execute(
        delete(CustomSlot).where(
            and_(
                CustomSlot.professional_id == professional_id,
                CustomSlot.slot_date == slot_date,
                CustomSlot.slot_time == parsed,
            )
        )
    )
    db.commit()
    if result.rowcount == 0:
        raise HTTPException(status_code=404, detail="Custom slot not found")
    return {"status": "ok"}


# ----------------------------
# Blocks
# ----------------------------
@router.get("/professionals/{professional_id}/blocks", response_model=list[BlockOut])
def list_blocks(
    professional_id: UUID,
    block_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    require_professional(db, professional_id)
    stmt = select(BlockedSlot).where(BlockedSlot.professional_id == professional_id)
    if block_date is not None:
        stmt = stmt.where(BlockedSlot.block_date == block_date)
    rows = db.execute(stmt.order_by(BlockedSlot.block_date, BlockedSlot.start_time)).scalars().all()
    return [_block_out(b) for b in rows]


@router.post("/professionals/{professional_id}/blocks", response_model=BlockOut, status_code=201)
def create_block(professional_id: UUID, payload: BlockCreate, db: Session = Depends(get_db)):
    require_professional(db, professional_id)
    try:
        start = parse_wall_clock(payload.start_time, "start_time") if payload.start_time else None
        end = parse_wall_clock(payload.end_time, "end_time") if payload.end_time else None
        validate_block_shape(payload.is_full_day, start, end)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    block = BlockedSlot(
        professional_id=professional_id,
        block_date=payload.block_date,
        is_full_day=payload.is_full_day,
        start_time=start,
        end_time=end,
        reason=payload.reason,
    )
    db.add(block)
    db.commit()
    db.refresh(block)
    logger.info(
        "Blocked %s for %s (%s)",
        payload.block_date,
        professional_id,
        "full day" if payload.is_full_day else f"{_hhmm(start)}-{_hhmm(end)}",
    )
    return _block_out(block)


@router.delete("/blocks/{block_id}")
def delete_block(block_id: UUID, db: Session = Depends(get_db)):
    block = db.get(BlockedSlot, block_id)
    if not block:
        raise HTTPException(status_code=404, detail="Block not found")
    db.delete(block)
    db.commit()
    logger.info("Removed block %s", block_id)
    return {"status": "ok"}


# ----------------------------
# Day start
# ----------------------------
def _day_config(db: Session, professional_id: UUID, config_date: date) -> Optional[ProfessionalDayConfig]:
    return db.execute(
        select(ProfessionalDayConfig).where(
            and_(
                ProfessionalDayConfig.professional_id == professional_id,
                ProfessionalDayConfig.config_date == config_date,
            )
        )
    ).scalars().first()


@router.get("/professionals/{professional_id}/day-start/{config_date}", response_model=DayStartOut)
def get_day_start(professional_id: UUID, config_date: date, db: Session = Depends(get_db)):
    require_professional(db, professional_id)
    config = _day_config(db, professional_id, config_date)
    return {"config_date": config_date, "start_time": _hhmm(config.custom_start_time) if config else None}


@router.put("/professionals/{professional_id}/day-start/{config_date}", response_model=DayStartOut)
def set_day_start(
    professional_id: UUID, config_date: date, payload: DayStartUpdate, db: Session = Depends(get_db)
):
    require_professional(db, professional_id)
    config = _day_config(db, professional_id, config_date)

    # Empty input goes back to the default opening
    if not payload.start_time.strip():
        if config:
            db.delete(config)
            db.commit()
        return {"config_date": config_date, "start_time": None}

    try:
        start = parse_wall_clock(payload.start_time, "start_time")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if config:
        config.custom_start_time = start
    else:
        db.add(ProfessionalDayConfig(professional_id=professional_id, config_date=config_date, custom_start_time=start))
    db.commit()
    logger.info("Day start for %s on %s set to %s", professional_id, config_date, _hhmm(start))
    return {"config_date": config_date, "start_time": _hhmm(start)}


@router.delete("/professionals/{professional_id}/day-start/{config_date}", response_model=DayStartOut)
def reset_day_start(professional_id: UUID, config_date: date, db: Session = Depends(get_db)):
    require_professional(db, professional_id)
    config = _day_config(db, professional_id, config_date)
    if config:
        db.delete(config)
        db.commit()
    return {"config_date": config_date, "start_time": None}
