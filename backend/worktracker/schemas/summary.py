from pydantic import BaseModel
from datetime import date, datetime
from typing import Optional, List


class SummaryEntry(BaseModel):
    id: int
    start_time: datetime
    end_time: Optional[datetime] = None
    description: Optional[str] = None
    seconds: int
    duration: str
    hourly_rate: float
    earnings: float
    is_running: bool


class SummaryResponse(BaseModel):
    start: Optional[date] = None
    end: Optional[date] = None
    currency: str
    currency_symbol: str
    total_seconds: int
    total_duration: str
    total_earnings: float
    logs: List[SummaryEntry]
