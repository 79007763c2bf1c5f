from fastapi import APIRouter, Depends, Form, Query
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from worktracker.core.cache import RequestCache, get_request_cache
from worktracker.core.dependencies import get_current_user_id
from worktracker.core.validation import require_int, require_non_empty_text, require_non_negative_number
from worktracker.database.session import get_db
from worktracker.services.day_service import delete_day, delete_work_log, edit_day, parse_day

router = APIRouter(prefix="/api", tags=["Logs"])

HOURS_PER_DAY = 24


# ---------------- DELETE LOG ----------------
@router.post("/delete-log")
def delete_log_route(
    log_id: str | None = Query(None, alias="id"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    raw_id = require_non_empty_text(log_id, "Missing log ID")
    target_id = require_int(raw_id, "Invalid log ID")
    delete_work_log(user_id, target_id, db)
    return RedirectResponse(url="/history", status_code=303)


# ---------------- DELETE DAY ----------------
@router.post("/delete-day")
def delete_day_route(
    date: str | None = Form(None),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    raw_date = require_non_empty_text(date, "Missing date")
    delete_day(user_id, parse_day(raw_date), db)
    return RedirectResponse(url="/weekly", status_code=303)


# ---------------- EDIT DAY ----------------
@router.post("/edit-day")
def edit_day_route(
    date: str | None = Form(None),
    hours: str | None = Form(None),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    cache: RequestCache = Depends(get_request_cache)
):
    raw_date = require_non_empty_text(date, "Invalid input")
    target_hours = require_non_negative_number(hours, "Invalid input", maximum=HOURS_PER_DAY)
    edit_day(user_id, parse_day(raw_date, "Invalid input"), target_hours, db, cache)
    return RedirectResponse(url="/weekly", status_code=303)
