from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from worktracker.core.cache import RequestCache, get_request_cache
from worktracker.core.dependencies import get_current_user_id
from worktracker.database.session import get_db
from worktracker.schemas.summary import SummaryResponse
from worktracker.services.day_service import parse_day
from worktracker.services.summary_service import build_summary

router = APIRouter(prefix="/api", tags=["Summary"])


@router.get("/summary", response_model=SummaryResponse)
def summary_route(
    start: str | None = Query(None),
    end: str | None = Query(None),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    cache: RequestCache = Depends(get_request_cache)
):
    """Logged time and earnings, optionally limited to an inclusive day range."""
    start_day = parse_day(start) if start else None
    end_day = parse_day(end) if end else None
    return build_summary(user_id, start_day, end_day, db, cache)
