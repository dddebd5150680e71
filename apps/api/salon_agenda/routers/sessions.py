import logging
from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.orm import Session

from salon_agenda.core.database import get_db
from salon_agenda.models.session import SessionStatus, TherapySession
from salon_agenda.routers.professionals import require_professional
from salon_agenda.schemas.sessions import SessionCreate, SessionOut, SessionUpdate
from salon_agenda.services.validators import parse_wall_clock, validate_status

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_session(db: Session, session_id: UUID) -> TherapySession:
    s = db.get(TherapySession, session_id)
    if not s:
        raise HTTPException(status_code=404, detail="Session not found")
    return s


def _session_out(s: TherapySession) -> dict:
    return {
        "session_id": str(s.session_id),
        "professional_id": str(s.professional_id),
        "client_name": s.client_name,
        "client_reference": s.client_reference,
        "session_date": s.session_date,
        "session_time": s.session_time.strftime("%H:%M") if s.session_time else None,
        "duration_code": s.duration_code,
        "therapy_type": s.therapy_type,
        "status": s.status.value,
        "is_confirmed_by_client": s.is_confirmed_by_client,
    }


@router.get("/professionals/{professional_id}/sessions", response_model=list[SessionOut])
def list_sessions(
    professional_id: UUID,
    session_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    require_professional(db, professional_id)
    stmt = select(TherapySession).where(TherapySession.professional_id == professional_id)
    if session_date is not None:
        stmt = stmt.where(TherapySession.session_date == session_date)
    rows = db.execute(
        stmt.order_by(TherapySession.session_date, TherapySession.session_time)
    ).scalars().all()
    return [_session_out(s) for s in rows]


@router.post("/professionals/{professional_id}/sessions", response_model=SessionOut, status_code=201)
def create_session(professional_id: UUID, payload: SessionCreate, db: Session = Depends(get_db)):
    require_professional(db, professional_id)
    try:
        session_time = parse_wall_clock(payload.session_time, "session_time") if payload.session_time else None
        status = validate_status(payload.status)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    s = TherapySession(
        professional_id=professional_id,
        client_name=payload.client_name.strip(),
        client_reference=payload.client_reference,
        session_date=payload.session_date,
        session_time=session_time,
        duration_code=payload.duration_code,
        therapy_type=payload.therapy_type,
        status=SessionStatus(status),
    )
    db.add(s)
    db.commit()
    db.refresh(s)
    logger.info("Scheduled session %s on %s %s", s.session_id, s.session_date, payload.session_time)
    return _session_out(s)


@router.patch("/sessions/{session_id}", response_model=SessionOut)
def update_session(session_id: UUID, payload: SessionUpdate, db: Session = Depends(get_db)):
    s = _require_session(db, session_id)
    if payload.status is not None:
        try:
            s.status = SessionStatus(validate_status(payload.status))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    if payload.is_confirmed_by_client is not None:
        s.is_confirmed_by_client = payload.is_confirmed_by_client
    db.commit()
    db.refresh(s)
    logger.info("Updated session %s status=%s", session_id, s.status.value)
    return _session_out(s)


@router.delete("/sessions/{session_id}")
def delete_session(session_id: UUID, db: Session = Depends(get_db)):
    s = _require_session(db, session_id)
    db.delete(s)
    db.commit()
    logger.info("Removed session %s", session_id)
    return {"status": "ok"}
