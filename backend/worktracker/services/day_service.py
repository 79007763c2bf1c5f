"""Manual day-level adjustments.

These rewrite ``total_seconds`` or remove rows directly and never go through
the timer transitions.
"""
import logging
from datetime import date, datetime, time, timezone

from fastapi import HTTPException
from sqlalchemy.orm import Session

from worktracker.core.cache import RequestCache
from worktracker.models.task import Task
from worktracker.models.work_log import WorkLog
from worktracker.services.data_cache import get_user_settings

logger = logging.getLogger(__name__)

SYNTHETIC_START = time(9, 0)
SYNTHETIC_DESCRIPTION = "Adjusted (manual)"


def parse_day(raw: str | None, detail: str = "Invalid date") -> date:
    try:
        return datetime.strptime(str(raw or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise HTTPException(status_code=400, detail=detail)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    end = datetime.combine(day, time(23, 59, 59, 999000), tzinfo=timezone.utc)
    return start, end


def _logs_for_day(user_id: str, day: date, db: Session) -> list[WorkLog]:
    start, end = day_bounds(day)
    return db.query(WorkLog).filter(
        WorkLog.user_id == user_id,
        WorkLog.start_time >= start,
        WorkLog.start_time <= end
    ).order_by(WorkLog.id.asc()).all()


def _delete_logs(user_id: str, log_ids: list[int], db: Session) -> None:
    if not log_ids:
        return
    db.query(Task).filter(
        Task.work_log_id.in_(log_ids),
        Task.user_id == user_id
    ).delete(synchronize_session=False)
    db.query(WorkLog).filter(
        WorkLog.user_id == user_id,
        WorkLog.id.in_(log_ids)
    ).delete(synchronize_session=False)


def delete_work_log(user_id: str, log_id: int, db: Session) -> bool:
    log = db.query(WorkLog).filter(
        WorkLog.id == log_id,
        WorkLog.user_id == user_id
    ).first()
    if not log:
        return False

    _delete_logs(user_id, [log.id], db)
    db.commit()
    logger.info(f"Work log {log_id} deleted for user {user_id}")
    return True


def delete_day(user_id: str, day: date, db: Session) -> int:
    log_ids = [log.id for log in _logs_for_day(user_id, day, db)]
    _delete_logs(user_id, log_ids, db)
    db.commit()
    logger.info(f"Deleted {len(log_ids)} work log(s) on {day} for user {user_id}")
    return len(log_ids)


def edit_day(user_id: str, day: date, hours: float, db: Session, cache: RequestCache) -> WorkLog:
    target_seconds = round(hours * 3600)
    logs = _logs_for_day(user_id, day, db)

    if not logs:
        synthetic_start = datetime.combine(day, SYNTHETIC_START, tzinfo=timezone.utc)
        user_settings = get_user_settings(db, cache, user_id)
        log = WorkLog(
            user_id=user_id,
            start_time=synthetic_start,
            end_time=synthetic_start,
            total_seconds=target_seconds,
            description=SYNTHETIC_DESCRIPTION,
            hourly_rate_at_time=user_settings.hourly_rate,
        )
        db.add(log)
        db.commit()
        db.refresh(log)
        logger.info(f"Created synthetic work log {log.id} on {day} with {target_seconds}s")
        return log

    last = logs[-1]
    others_seconds = sum(int(log.total_seconds or 0) for log in logs[:-1])
    last.total_seconds = max(0, target_seconds - others_seconds)
    db.commit()
    db.refresh(last)
    logger.info(f"Adjusted work log {last.id} on {day} to {last.total_seconds}s")
    return last
