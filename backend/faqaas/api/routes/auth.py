# faqaas/api/routes/auth.py
import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse

from faqaas.api.deps import AUTH_COOKIE_NAME, get_settings
from faqaas.api.templating import templates
from faqaas.config import Settings
from faqaas.utils.security import is_admin_login, new_admin_session

logger = logging.getLogger(__name__)

router = APIRouter()

ADMIN_COOKIE_PATH = "/admin"


@router.get("/login", include_in_schema=False)
def get_login(request: Request):
    return templates.TemplateResponse(request, "admin/login.html", {
        "page_title": "Admin / Login",
    })


@router.post("/login", include_in_schema=False)
def login(
    email: str = Form(""),
    password: str = Form(""),
    settings: Settings = Depends(get_settings),
):
    if not is_admin_login(email, password, settings.ADMIN_PASSWORD):
        # Same answer for a wrong email and a wrong password
        logger.warning("Failed admin login")
        return RedirectResponse("/admin/login", status_code=302)

    token, expires_at = new_admin_session(settings.JWT_KEY)
    response = RedirectResponse("/admin/faqs", status_code=302)
    # https://infosec.mozilla.org/guidelines/web_security#cookies
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=token,
        path=ADMIN_COOKIE_PATH,
        expires=expires_at,
        secure=not settings.HTTP_ALLOWED,
        httponly=True,
    )
    return response


@router.post("/logout", include_in_schema=False)
def logout(settings: Settings = Depends(get_settings)):
    response = RedirectResponse("/admin/login", status_code=302)
    response.delete_cookie(
        key=AUTH_COOKIE_NAME,
        path=ADMIN_COOKIE_PATH,
        secure=not settings.HTTP_ALLOWED,
        httponly=True,
    )
    return response
