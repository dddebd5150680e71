import enum
import uuid
from sqlalchemy import Column, Date, Time, String, Boolean, DateTime, Enum, ForeignKey, Uuid
from sqlalchemy.sql import func

from salon_agenda.core.database import Base

class SessionStatus(str, enum.Enum):
    scheduled = "scheduled"
    done = "done"
    confirmed = "confirmed"
    cancelled_by_client = "cancelled_by_client"
    cancelled_by_professional = "cancelled_by_professional"

class TherapySession(Base):
    __tablename__ = "sessions"

    session_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    professional_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("professionals.professional_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    client_name = Column(String, nullable=False)
    client_reference = Column(String, nullable=True)  # id in the client registry, opaque here

    session_date = Column(Date, nullable=False, index=True)
    session_time = Column(Time, nullable=True)
    duration_code = Column(String, nullable=False, default="1h")
    therapy_type = Column(String, nullable=True)

    status = Column(
        Enum(SessionStatus, name="session_status", native_enum=False),
        nullable=False,
        default=SessionStatus.scheduled,
    )
    is_confirmed_by_client = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
