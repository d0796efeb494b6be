# faqaas/api/middleware.py
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

# Public pages stay reachable over plain HTTP
PROTECTED_PREFIXES = ("/api", "/admin")


class RequireHTTPSMiddleware(BaseHTTPMiddleware):
    """
    Redirects (301) requests that reached the proxy over plain HTTP to the
    same URL under https. Relies on the X-Forwarded-Proto header set by the
    load balancer.
    """

    async def dispatch(self, request, call_next):
        path = request.url.path
        if path.startswith(PROTECTED_PREFIXES) and request.headers.get("x-forwarded-proto") != "https":
            target = request.url.replace(scheme="https", port=None)
            return RedirectResponse(str(target), status_code=301)
        return await call_next(request)
