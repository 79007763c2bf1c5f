import logging
import math
from datetime import datetime

from fastapi import HTTPException
from sqlalchemy.orm import Session

from worktracker.core.cache import RequestCache
from worktracker.core.validation import require_non_empty_text
from worktracker.models.task import Task
from worktracker.models.work_log import WorkLog
from worktracker.services.data_cache import (
    get_current_work_log,
    get_tasks_for_log,
    get_user_settings,
)
from worktracker.utils.time import ensure_aware_utc, utc_now

logger = logging.getLogger(__name__)

IDLE = "idle"
RUNNING = "running"
PAUSED = "paused"
ENDED = "ended"


def elapsed_seconds(since: datetime, now: datetime) -> int:
    """Whole seconds between two instants, floored and never negative."""
    delta = ensure_aware_utc(now) - ensure_aware_utc(since)
    return max(0, math.floor(delta.total_seconds()))


def work_log_state(log: WorkLog | None) -> str:
    if log is None:
        return IDLE
    if log.end_time is not None:
        return ENDED
    if log.pause_time is not None:
        return PAUSED
    return RUNNING


def live_total_seconds(log: WorkLog, now: datetime | None = None) -> int:
    total = int(log.total_seconds or 0)
    if work_log_state(log) == RUNNING:
        total += elapsed_seconds(log.start_time, now or utc_now())
    return total


def _require_active_log(user_id: str, db: Session, cache: RequestCache) -> WorkLog:
    log = get_current_work_log(db, cache, user_id)
    if not log:
        raise HTTPException(status_code=400, detail="No active log")
    return log


# ---------------- START ----------------
def start_work_log(user_id: str, db: Session, cache: RequestCache, now: datetime | None = None) -> WorkLog:
    now = ensure_aware_utc(now or utc_now())

    if get_current_work_log(db, cache, user_id):
        logger.warning(f"Start rejected for user {user_id}: session already active")
        raise HTTPException(status_code=400, detail="Session already active")

    user_settings = get_user_settings(db, cache, user_id)
    log = WorkLog(
        user_id=user_id,
        start_time=now,
        total_seconds=0,
        hourly_rate_at_time=user_settings.hourly_rate,
    )
    db.add(log)
    db.commit()
    db.refresh(log)
    logger.info(f"Work log {log.id} started for user {user_id}")
    return log


# ---------------- PAUSE ----------------
def pause_work_log(user_id: str, db: Session, cache: RequestCache, now: datetime | None = None) -> WorkLog:
    now = ensure_aware_utc(now or utc_now())
    log = _require_active_log(user_id, db, cache)

    if log.pause_time is not None:
        raise HTTPException(status_code=400, detail="Already paused")

    log.total_seconds = int(log.total_seconds or 0) + elapsed_seconds(log.start_time, now)
    log.pause_time = now
    db.commit()
    db.refresh(log)
    logger.info(f"Work log {log.id} paused at {log.total_seconds}s")
    return log


# ---------------- RESUME ----------------
def resume_work_log(user_id: str, db: Session, cache: RequestCache, now: datetime | None = None) -> WorkLog:
    now = ensure_aware_utc(now or utc_now())
    log = _require_active_log(user_id, db, cache)

    if log.pause_time is None:
        raise HTTPException(status_code=400, detail="Not paused")

    # total_seconds already holds everything up to the pause.
    log.start_time = now
    log.pause_time = None
    db.commit()
    db.refresh(log)
    logger.info(f"Work log {log.id} resumed")
    return log


# ---------------- END ----------------
def end_work_log(user_id: str, db: Session, cache: RequestCache, now: datetime | None = None) -> WorkLog | None:
    now = ensure_aware_utc(now or utc_now())
    log = get_current_work_log(db, cache, user_id)
    if not log:
        return None

    total = int(log.total_seconds or 0)
    if log.pause_time is None:
        total += elapsed_seconds(log.start_time, now)

    log.total_seconds = total
    log.pause_time = None
    log.end_time = now
    db.commit()
    db.refresh(log)
    logger.info(f"Work log {log.id} ended with {total}s")
    return log


# ---------------- COMPLETE TASK ----------------
def complete_task(
    user_id: str,
    description: str | None,
    db: Session,
    cache: RequestCache,
    now: datetime | None = None
) -> Task:
    description = require_non_empty_text(description, "Description required")
    now = ensure_aware_utc(now or utc_now())

    log = get_current_work_log(db, cache, user_id)
    if not log:
        raise HTTPException(status_code=400, detail="No active work log")

    tasks = get_tasks_for_log(db, cache, user_id, log.id)
    base_time = tasks[-1].created_at if tasks else log.start_time

    task = Task(
        work_log_id=log.id,
        user_id=user_id,
        description=description,
        duration=elapsed_seconds(base_time, now),
        created_at=now,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info(f"Task {task.id} recorded on work log {log.id} ({task.duration}s)")
    return task
