"""Cached reads against the row store.

Every lookup goes through the request's :class:`RequestCache`, so repeated
reads of the same entity within the TTL hit the store once.
"""
from datetime import datetime

from sqlalchemy.orm import Session

from worktracker.config import settings
from worktracker.core.cache import RequestCache
from worktracker.models.task import Task
from worktracker.models.user_settings import UserSettings
from worktracker.models.work_log import WorkLog
from worktracker.schemas.settings import UserSettingsOut


def get_user_settings(db: Session, cache: RequestCache, user_id: str) -> UserSettingsOut:
    def load() -> UserSettingsOut:
        row = db.query(UserSettings).filter(UserSettings.user_id == user_id).first()
        return UserSettingsOut(
            currency=row.currency if row and row.currency else settings.DEFAULT_CURRENCY,
            hourly_rate=float(row.hourly_rate if row and row.hourly_rate is not None else settings.DEFAULT_HOURLY_RATE),
        )

    return cache.get_or_load(f"settings:{user_id}", load)


def get_current_work_log(db: Session, cache: RequestCache, user_id: str) -> WorkLog | None:
    def load() -> WorkLog | None:
        return db.query(WorkLog).filter(
            WorkLog.user_id == user_id,
            WorkLog.end_time == None  # noqa: E711
        ).order_by(WorkLog.id.desc()).first()

    return cache.get_or_load(f"current-log:{user_id}", load)


def get_tasks_for_log(db: Session, cache: RequestCache, user_id: str, log_id: int) -> list[Task]:
    def load() -> list[Task]:
        return db.query(Task).filter(
            Task.work_log_id == log_id,
            Task.user_id == user_id
        ).order_by(Task.created_at.asc(), Task.id.asc()).all()

    return cache.get_or_load(f"tasks:{log_id}", load)


def get_work_logs(
    db: Session,
    cache: RequestCache,
    user_id: str,
    start: datetime | None = None,
    end: datetime | None = None
) -> list[WorkLog]:
    def load() -> list[WorkLog]:
        query = db.query(WorkLog).filter(WorkLog.user_id == user_id)
        if start is not None:
            query = query.filter(WorkLog.start_time >= start)
        if end is not None:
            query = query.filter(WorkLog.start_time <= end)
        return query.order_by(WorkLog.start_time.desc()).all()

    start_key = start.isoformat() if start else ""
    end_key = end.isoformat() if end else ""
    return cache.get_or_load(f"logs:{user_id}:{start_key}:{end_key}", load)
