from datetime import date, datetime

from sqlalchemy.orm import Session

from worktracker.core.cache import RequestCache
from worktracker.schemas.summary import SummaryEntry, SummaryResponse
from worktracker.services.data_cache import get_user_settings, get_work_logs
from worktracker.services.day_service import day_bounds
from worktracker.services.timer_service import RUNNING, live_total_seconds, work_log_state
from worktracker.utils.formatting import calculate_earnings, currency_symbol, format_duration
from worktracker.utils.time import ensure_aware_utc, utc_now


def build_summary(
    user_id: str,
    start: date | None,
    end: date | None,
    db: Session,
    cache: RequestCache,
    now: datetime | None = None
) -> SummaryResponse:
    """Earnings per work log in the range, priced at each log's snapshotted rate."""
    now = ensure_aware_utc(now or utc_now())
    user_settings = get_user_settings(db, cache, user_id)

    range_start = day_bounds(start)[0] if start else None
    range_end = day_bounds(end)[1] if end else None
    logs = get_work_logs(db, cache, user_id, range_start, range_end)

    entries = []
    total_seconds = 0
    total_earnings = 0.0
    for log in logs:
        seconds = live_total_seconds(log, now)
        rate = log.hourly_rate_at_time if log.hourly_rate_at_time is not None else user_settings.hourly_rate
        earnings = calculate_earnings(seconds, rate)
        total_seconds += seconds
        total_earnings += earnings
        entries.append(SummaryEntry(
            id=log.id,
            start_time=ensure_aware_utc(log.start_time),
            end_time=ensure_aware_utc(log.end_time) if log.end_time else None,
            description=log.description,
            seconds=seconds,
            duration=format_duration(seconds),
            hourly_rate=rate,
            earnings=round(earnings, 2),
            is_running=work_log_state(log) == RUNNING,
        ))

    return SummaryResponse(
        start=start,
        end=end,
        currency=user_settings.currency,
        currency_symbol=currency_symbol(user_settings.currency),
        total_seconds=total_seconds,
        total_duration=format_duration(total_seconds),
        total_earnings=round(total_earnings, 2),
        logs=entries,
    )
