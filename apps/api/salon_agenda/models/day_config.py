import uuid
from sqlalchemy import Column, Date, Time, ForeignKey, UniqueConstraint, Uuid

from salon_agenda.core.database import Base

class ProfessionalDayConfig(Base):
    __tablename__ = "professional_day_configs"

    day_config_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    professional_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("professionals.professional_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    config_date = Column(Date, nullable=False)
    custom_start_time = Column(Time, nullable=False)

    __table_args__ = (
        UniqueConstraint("professional_id", "config_date", name="uq_professional_day_config"),
    )
