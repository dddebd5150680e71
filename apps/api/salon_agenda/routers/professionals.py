import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from salon_agenda.core.database import get_db
from salon_agenda.models.professional import Professional
from salon_agenda.schemas.professionals import ProfessionalCreate, ProfessionalOut

logger = logging.getLogger(__name__)

router = APIRouter()


def require_professional(db: Session, professional_id: UUID) -> Professional:
    prof = db.get(Professional, professional_id)
    if not prof:
        raise HTTPException(status_code=404, detail="Professional not found")
    return prof


def _professional_out(p: Professional) -> dict:
    return {"professional_id": str(p.professional_id), "name": p.name, "is_active": p.is_active}


@router.get("", response_model=list[ProfessionalOut])
@router.get("/", response_model=list[ProfessionalOut])
def list_professionals(db: Session = Depends(get_db)):
    profs = db.execute(select(Professional).order_by(Professional.name.asc())).scalars().all()
    return [_professional_out(p) for p in profs]


@router.post("", response_model=ProfessionalOut, status_code=201)
@router.post("/", response_model=ProfessionalOut, status_code=201)
def create_professional(payload: ProfessionalCreate, db: Session = Depends(get_db)):
    name = payload.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="name is required")
    prof = Professional(name=name)
    db.add(prof)
    db.commit()
    db.refresh(prof)
    logger.info("Created professional %s", prof.professional_id)
    return _professional_out(prof)


@router.get("/{professional_id}", response_model=ProfessionalOut)
def get_professional(professional_id: UUID, db: Session = Depends(get_db)):
    return _professional_out(require_professional(db, professional_id))
