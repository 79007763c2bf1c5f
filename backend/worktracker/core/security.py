from datetime import datetime, timedelta, timezone
import uuid
from jose import jwt, JWTError
from worktracker.config import settings


def create_access_token(subject: str, expires_minutes: int = 60) -> str:
    """Mint a token the way the identity provider does. Used by local tooling and tests."""
    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": subject,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=expires_minutes)).timestamp()),
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )


def decode_token(token: str):
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
        return payload
    except JWTError:
        return None
