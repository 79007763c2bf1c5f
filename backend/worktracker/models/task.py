from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from worktracker.database.base import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    work_log_id = Column(Integer, ForeignKey("work_logs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)

    description = Column(Text, nullable=False)
    duration = Column(Integer, default=0, nullable=False)  # seconds
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    work_log = relationship("WorkLog", back_populates="tasks")
