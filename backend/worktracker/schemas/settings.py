from pydantic import BaseModel, Field, field_validator
from typing import Optional


class UserSettingsOut(BaseModel):
    currency: str
    hourly_rate: float

    class Config:
        from_attributes = True


class UserSettingsUpdate(BaseModel):
    currency: Optional[str] = None
    hourly_rate: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, value: Optional[str]):
        if value is None:
            return value
        code = value.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError("Currency must be a 3-letter code")
        return code
