from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.sql import func

from worktracker.database.base import Base


class UserSettings(Base):
    __tablename__ = "user_settings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, unique=True, index=True, nullable=False)

    currency = Column(String(3), nullable=False, default="GBP")
    hourly_rate = Column(Float, nullable=False, default=10)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
