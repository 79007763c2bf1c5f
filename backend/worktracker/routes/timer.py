from fastapi import APIRouter, Depends, Form
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from worktracker.core.cache import RequestCache, get_request_cache
from worktracker.core.dependencies import get_current_user_id
from worktracker.database.session import get_db
from worktracker.schemas.work_log import LogResponse, StateResponse
from worktracker.services.data_cache import get_current_work_log, get_tasks_for_log
from worktracker.services.timer_service import (
    complete_task,
    end_work_log,
    pause_work_log,
    resume_work_log,
    start_work_log,
)

router = APIRouter(prefix="/api", tags=["Timer"])


# ---------------- START ----------------
@router.post("/start")
def start_route(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    cache: RequestCache = Depends(get_request_cache)
):
    start_work_log(user_id, db, cache)
    return RedirectResponse(url="/", status_code=303)


# ---------------- PAUSE ----------------
@router.post("/pause", response_model=LogResponse)
def pause_route(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    cache: RequestCache = Depends(get_request_cache)
):
    return {"log": pause_work_log(user_id, db, cache)}


# ---------------- RESUME ----------------
@router.post("/resume", response_model=LogResponse)
def resume_route(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    cache: RequestCache = Depends(get_request_cache)
):
    return {"log": resume_work_log(user_id, db, cache)}


# ---------------- END ----------------
@router.post("/end-day")
def end_day_route(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    cache: RequestCache = Depends(get_request_cache)
):
    # Ending with no active session is a no-op.
    end_work_log(user_id, db, cache)
    return RedirectResponse(url="/", status_code=303)


# ---------------- COMPLETE TASK ----------------
@router.post("/complete-task")
def complete_task_route(
    description: str | None = Form(None),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    cache: RequestCache = Depends(get_request_cache)
):
    complete_task(user_id, description, db, cache)
    return RedirectResponse(url="/", status_code=303)


# ---------------- STATE ----------------
@router.get("/state", response_model=StateResponse)
def state_route(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    cache: RequestCache = Depends(get_request_cache)
):
    log = get_current_work_log(db, cache, user_id)
    tasks = get_tasks_for_log(db, cache, user_id, log.id) if log else []
    return {"log": log, "tasks": tasks}
