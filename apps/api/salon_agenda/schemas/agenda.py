from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel

class FreeSlotsOut(BaseModel):
    professional_id: str
    date: date
    duration_minutes: int
    granularity_minutes: int
    free_slots: list[str]

class DayTimeOut(BaseModel):
    time: str
    kind: Literal["booked", "free"]
    session_id: Optional[str] = None

class WeekDayOut(BaseModel):
    date: date
    day_start: Optional[str]
    free_slots: list[str]
    times: list[DayTimeOut]

class WeekOut(BaseModel):
    professional_id: str
    week_start: date
    duration_minutes: int
    days: list[WeekDayOut]
