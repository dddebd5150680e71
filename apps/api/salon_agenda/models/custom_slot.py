import uuid
from sqlalchemy import Column, Date, Time, ForeignKey, UniqueConstraint, Uuid

from salon_agenda.core.database import Base

class CustomSlot(Base):
    __tablename__ = "custom_slots"

    custom_slot_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    professional_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("professionals.professional_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    slot_date = Column(Date, nullable=False)
    slot_time = Column(Time, nullable=False)

    __table_args__ = (
        UniqueConstraint("professional_id", "slot_date", "slot_time", name="uq_custom_slot"),
    )
