from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, Float, Text, Index, text
from sqlalchemy.orm import relationship

from worktracker.database.base import Base


class WorkLog(Base):
    __tablename__ = "work_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    # Beginning of the current running interval, reset on resume.
    start_time = Column(DateTime(timezone=True), nullable=False)
    pause_time = Column(DateTime(timezone=True), nullable=True)
    end_time = Column(DateTime(timezone=True), nullable=True)

    # Excludes the interval that is currently running.
    total_seconds = Column(Integer, default=0, nullable=False)
    description = Column(Text, nullable=True)
    hourly_rate_at_time = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    tasks = relationship(
        "Task",
        back_populates="work_log",
        cascade="all, delete-orphan",
        order_by="Task.created_at",
    )

    __table_args__ = (
        Index(
            "uq_work_logs_active_user",
            "user_id",
            unique=True,
            sqlite_where=text("end_time IS NULL"),
            postgresql_where=text("end_time IS NULL"),
        ),
    )
