"""
Bearer token verification.

Tokens are issued by the external identity provider and signed with the
shared secret; ``sub`` carries the user id.
"""
from datetime import datetime, timedelta
from typing import Optional
import logging

from jose import JWTError, jwt
from pydantic import BaseModel

from core.config import settings

logger = logging.getLogger(__name__)

ACCESS_TOKEN_EXPIRE_MINUTES = 60


class TokenData(BaseModel):
    user_id: str
    email: Optional[str] = None


def create_access_token(user_id: str, email: Optional[str] = None,
                        expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token shaped like the identity provider's (local tooling and tests)."""
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "sub": user_id,
        "aud": settings.JWT_AUDIENCE,
        "exp": expire,
        "iat": datetime.utcnow(),
    }
    if email:
        to_encode["email"] = email
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> Optional[TokenData]:
    """Decode a token, returning None when it is invalid, expired or incomplete."""
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
        )
    except JWTError as e:
        logger.warning(f"JWT verification failed: {str(e)}")
        return None

    user_id = payload.get("sub")
    if not user_id:
        logger.warning("Token missing required claims")
        return None
    return TokenData(user_id=str(user_id), email=payload.get("email"))
