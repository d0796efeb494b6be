# faqaas/api/deps.py
import re

from fastapi import Depends, HTTPException, Request, status

from faqaas.config import Settings
from faqaas.errors import AdminLoginRequired
from faqaas.repository import FAQRepository
from faqaas.services.locale_catalog import LocaleCatalog
from faqaas.utils.security import is_valid_admin_token

AUTH_COOKIE_NAME = "Authorization"
API_KEY_HEADER = "Authorization"
LOCALE_COOKIE_NAME = "lang"

# Ids are stored as signed 64-bit integers
MAX_FAQ_ID = 2**63 - 1
_FAQ_ID_RE = re.compile(r"[0-9]+")


def parse_faq_id(raw: str) -> int | None:
    """ASCII digits within the store's integer range, otherwise None."""
    if not _FAQ_ID_RE.fullmatch(raw):
        return None
    faq_id = int(raw)
    if faq_id > MAX_FAQ_ID:
        return None
    return faq_id


# Everything below is wired once in create_app() and stored on app.state

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> FAQRepository:
    return request.app.state.repository


def get_catalog(request: Request) -> LocaleCatalog:
    return request.app.state.catalog


def require_api_key(request: Request, settings: Settings = Depends(get_settings)) -> None:
    if not settings.api_key_required:
        return
    if request.headers.get(API_KEY_HEADER) != settings.API_KEY:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="unauthorized")


def logged_in_as_admin(request: Request, settings: Settings) -> bool:
    return is_valid_admin_token(request.cookies.get(AUTH_COOKIE_NAME), settings.JWT_KEY)


def require_admin(request: Request, settings: Settings = Depends(get_settings)) -> None:
    if not settings.admin_password_required:
        return
    if not logged_in_as_admin(request, settings):
        raise AdminLoginRequired()
