from datetime import date
from typing import Optional

from pydantic import BaseModel

class CustomSlotCreate(BaseModel):
    slot_date: date
    slot_time: str  # HH:MM

class BlockCreate(BaseModel):
    block_date: date
    is_full_day: bool = False
    start_time: Optional[str] = None  # HH:MM
    end_time: Optional[str] = None
    reason: Optional[str] = None

class BlockOut(BaseModel):
    block_id: str
    block_date: date
    is_full_day: bool
    start_time: Optional[str]
    end_time: Optional[str]
    reason: Optional[str]

class DayStartUpdate(BaseModel):
    # Empty string resets the day to the default opening
    start_time: str = ""

class DayStartOut(BaseModel):
    config_date: date
    start_time: Optional[str]
