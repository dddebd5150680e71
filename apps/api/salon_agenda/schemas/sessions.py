from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

class SessionCreate(BaseModel):
    client_name: str = Field(min_length=1)
    client_reference: Optional[str] = None
    session_date: date
    session_time: Optional[str] = None  # HH:MM
    duration_code: str = "1h"
    therapy_type: Optional[str] = None
    status: str = "scheduled"

class SessionUpdate(BaseModel):
    status: Optional[str] = None
    is_confirmed_by_client: Optional[bool] = None

class SessionOut(BaseModel):
    session_id: str
    professional_id: str
    client_name: str
    client_reference: Optional[str]
    session_date: date
    session_time: Optional[str]
    duration_code: str
    therapy_type: Optional[str]
    status: str
    is_confirmed_by_client: bool
