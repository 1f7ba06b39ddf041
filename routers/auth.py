from typing import Optional
import logging

from fastapi import APIRouter, Depends, Header, Query
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from core.context import ViewerContext, build_context, resolve_locale
from core.exceptions import AuthenticationError
from core.response import success_response
from services.auth import TokenData, verify_token

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[TokenData]:
    """The signed-in user, or None for anonymous requests.

    A token that is present but invalid is rejected rather than ignored.
    """
    if not credentials or not credentials.credentials:
        return None

    token_data = verify_token(credentials.credentials)
    if token_data is None:
        raise AuthenticationError("Could not validate credentials")
    return token_data


def get_current_user(user: Optional[TokenData] = Depends(get_optional_user)) -> TokenData:
    if user is None:
        raise AuthenticationError("Authentication credentials required")
    return user


def get_viewer_context(
    lang: Optional[str] = Query(None, description="Display language (en or pt)"),
    accept_language: Optional[str] = Header(None),
    user: Optional[TokenData] = Depends(get_optional_user)
) -> ViewerContext:
    """Locale, viewer and today's date for the current request."""
    return build_context(
        locale=resolve_locale(lang, accept_language),
        user_id=user.user_id if user else None,
    )


@router.get("/me")
def get_current_user_info(
    current_user: TokenData = Depends(get_current_user),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    """Who the bearer token belongs to, with the resolved locale."""
    return success_response(
        data={
            "user_id": current_user.user_id,
            "email": current_user.email,
            "locale": ctx.locale,
            "today": ctx.today.isoformat(),
        },
        message="Authenticated"
    )
