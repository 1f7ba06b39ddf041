"""
Explicit viewer context passed to mapping, filtering and service calls.
"""
from datetime import date, datetime
from typing import Literal, Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel

from core.config import settings

Locale = Literal["en", "pt"]
SUPPORTED_LOCALES = ("en", "pt")


class ViewerContext(BaseModel):
    locale: Locale = "en"
    user_id: Optional[str] = None
    today: date

    class Config:
        frozen = True

    @property
    def is_pt(self) -> bool:
        return self.locale == "pt"

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


def local_today() -> date:
    """Current calendar date in the directory's time zone."""
    return datetime.now(ZoneInfo(settings.TIME_ZONE)).date()


def resolve_locale(lang: Optional[str] = None, accept_language: Optional[str] = None) -> Locale:
    """Pick a supported locale from an explicit choice or an Accept-Language header."""
    for candidate in (lang, accept_language):
        if not candidate:
            continue
        for part in candidate.split(","):
            code = part.split(";")[0].strip().lower()[:2]
            if code in SUPPORTED_LOCALES:
                return code
    return settings.DEFAULT_LOCALE if settings.DEFAULT_LOCALE in SUPPORTED_LOCALES else "en"


def build_context(
    locale: Locale = "en",
    user_id: Optional[str] = None,
    today: Optional[date] = None
) -> ViewerContext:
    return ViewerContext(locale=locale, user_id=user_id, today=today or local_today())
