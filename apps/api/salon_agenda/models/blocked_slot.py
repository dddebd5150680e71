import uuid
from sqlalchemy import Column, Date, Time, String, Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.sql import func

from salon_agenda.core.database import Base

class BlockedSlot(Base):
    __tablename__ = "blocked_slots"

    block_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    professional_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("professionals.professional_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    block_date = Column(Date, nullable=False, index=True)
    is_full_day = Column(Boolean, nullable=False, default=False)
    start_time = Column(Time, nullable=True)  # NULL for full-day blocks
    end_time = Column(Time, nullable=True)

    reason = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
