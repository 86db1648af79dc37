"""JWT issuance and bearer-token dependencies."""

import os
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from domain.model.errors import InvalidTokenError

logger = logging.getLogger(__name__)

# JWT Configuration
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not JWT_SECRET_KEY:
    raise ValueError(
        "JWT_SECRET_KEY environment variable is required. "
        "Generate a secure key with: openssl rand -hex 32"
    )
JWT_ALGORITHM = "HS256"
JWT_EXPIRATION = timedelta(hours=1)

security = HTTPBearer(auto_error=False)


def create_access_token(user_id: str, secret_key: Optional[str] = None) -> str:
    """Create a signed access token for user, valid for one hour."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "exp": now + JWT_EXPIRATION,
        "iat": now,
    }
    return jwt.encode(payload, secret_key or JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def verify_token(token: str, secret_key: Optional[str] = None) -> str:
    """Verify token signature and expiry, and return the user_id it carries.

    Raises:
        InvalidTokenError: bad signature, expired, or no subject claim
    """
    try:
        payload = jwt.decode(token, secret_key or JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.debug(f"JWT verification failed: {e}")
        raise InvalidTokenError("Invalid or expired token") from e

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidTokenError("Invalid or expired token")
    return user_id


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Resolve the bearer token to a user id.

    401 when no Bearer credential is presented, 403 when it does not verify.
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return verify_token(credentials.credentials)
    except InvalidTokenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
