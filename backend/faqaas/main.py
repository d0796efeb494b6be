# faqaas/main.py
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from faqaas.api.middleware import RequireHTTPSMiddleware
from faqaas.api.routes import admin, api, auth, public
from faqaas.api.templating import STATIC_DIR, templates
from faqaas.config import Settings, get_settings
from faqaas.database.connection import build_engine, build_session_factory, init_db
from faqaas.errors import AdminLoginRequired, StorageError
from faqaas.logging_setup import setup_logging
from faqaas.repository import FAQRepository, SQLFAQRepository
from faqaas.services.locale_catalog import LocaleCatalog

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "internal error"


def _error_response(request: Request, status_code: int, message: str, headers=None):
    if request.url.path.startswith("/api"):
        return JSONResponse({"error": message}, status_code=status_code, headers=headers)
    return templates.TemplateResponse(
        request, "public/error.html",
        {"page_title": message, "status_code": status_code, "message": message},
        status_code=status_code, headers=headers,
    )


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(request, exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        # The detail stays in the server log, clients only learn that it failed
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return _error_response(request, 500, INTERNAL_ERROR)

    @app.exception_handler(AdminLoginRequired)
    async def admin_login_handler(request: Request, exc: AdminLoginRequired):
        return RedirectResponse("/admin/login", status_code=302)


def create_app(settings: Settings | None = None, repository: FAQRepository | None = None) -> FastAPI:
    """
    Composition root: settings, locale catalog and repository are built once
    here and handed to the handlers through app.state.
    """
    settings = settings or get_settings()
    catalog = LocaleCatalog.from_setting(settings.SUPPORTED_LOCALES)

    if repository is None:
        engine = build_engine(settings.DATABASE_URL)
        init_db(engine)
        repository = SQLFAQRepository(build_session_factory(engine))
        logger.info("Connected to %s database", engine.dialect.name)

    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.repository = repository

    if not settings.HTTP_ALLOWED:
        app.add_middleware(RequireHTTPSMiddleware)

    _register_exception_handlers(app)

    # Register Routes
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(public.router, tags=["Public"])
    app.include_router(api.router, prefix="/api", tags=["API"])
    app.include_router(auth.router, prefix="/admin", tags=["Authentication"])
    app.include_router(admin.router, prefix="/admin", tags=["Admin"])

    return app


def run() -> None:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "faqaas.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.PORT,
        log_config=None,
    )
