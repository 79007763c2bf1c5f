from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from worktracker.core.cache import RequestCache, get_request_cache
from worktracker.core.dependencies import get_current_user_id
from worktracker.database.session import get_db
from worktracker.schemas.settings import UserSettingsOut, UserSettingsUpdate
from worktracker.services.data_cache import get_user_settings
from worktracker.services.settings_service import update_user_settings

router = APIRouter(prefix="/api/settings", tags=["Settings"])


@router.get("", response_model=UserSettingsOut)
def read_settings(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    cache: RequestCache = Depends(get_request_cache)
):
    return get_user_settings(db, cache, user_id)


@router.post("", response_model=UserSettingsOut)
def write_settings(
    payload: UserSettingsUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return update_user_settings(user_id, payload, db)
