import logging

from sqlalchemy.orm import Session

from worktracker.config import settings
from worktracker.models.user_settings import UserSettings
from worktracker.schemas.settings import UserSettingsUpdate

logger = logging.getLogger(__name__)


def update_user_settings(user_id: str, payload: UserSettingsUpdate, db: Session) -> UserSettings:
    row = db.query(UserSettings).filter(UserSettings.user_id == user_id).first()
    if not row:
        row = UserSettings(
            user_id=user_id,
            currency=settings.DEFAULT_CURRENCY,
            hourly_rate=settings.DEFAULT_HOURLY_RATE,
        )
        db.add(row)

    for key, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(row, key, value)

    db.commit()
    db.refresh(row)
    logger.info(f"Settings updated for user {user_id}: {row.currency} {row.hourly_rate}/h")
    return row
