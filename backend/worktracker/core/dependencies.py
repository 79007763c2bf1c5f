import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from worktracker.core.security import decode_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized"
    )


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme)
) -> str:
    """Resolve the caller's identity from the provider-issued bearer token."""
    if credentials is None or not credentials.credentials:
        raise _unauthorized()

    payload = decode_token(credentials.credentials)
    if payload is None:
        logger.debug("Rejected bearer token: invalid or expired")
        raise _unauthorized()

    sub = payload.get("sub")
    if not sub:
        logger.debug("Rejected bearer token: missing subject")
        raise _unauthorized()

    return str(sub)
