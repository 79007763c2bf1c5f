from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional, List

from worktracker.utils.time import ensure_aware_utc


# ---------- WORK LOG ----------
class WorkLogOut(BaseModel):
    id: int
    start_time: datetime
    pause_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    total_seconds: int = 0
    hourly_rate_at_time: Optional[float] = None
    description: Optional[str] = None

    @field_validator("start_time", "pause_time", "end_time")
    @classmethod
    def normalize_utc(cls, value: Optional[datetime]):
        if value is None:
            return value
        return ensure_aware_utc(value)

    class Config:
        from_attributes = True


class LogResponse(BaseModel):
    log: WorkLogOut


# ---------- TASK ----------
class TaskOut(BaseModel):
    id: int
    work_log_id: int
    user_id: str
    description: str
    duration: int
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def normalize_utc(cls, value: datetime):
        return ensure_aware_utc(value)

    class Config:
        from_attributes = True


# ---------- STATE ----------
class StateResponse(BaseModel):
    log: Optional[WorkLogOut] = None
    tasks: List[TaskOut] = []
