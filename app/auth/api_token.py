# =============================================================================
# app/auth/api_token.py - Shared-Secret Token Gate
# =============================================================================
# Middleware that rejects mutating requests unless they carry
#   Authorization: Bearer <API_TOKEN>
#
# - GET requests pass through unchecked (method compared case-insensitively)
# - the header value must match exactly (case-sensitive, whole value)
# - rejections get 401 with a plain-text body and never reach a router
#
# Usage:
#   app.add_middleware(ApiTokenMiddleware, api_token=settings.API_TOKEN)
# =============================================================================

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

READ_ONLY_METHODS = frozenset({"GET"})
INVALID_TOKEN_MESSAGE = "Invalid API token."


class ApiTokenMiddleware(BaseHTTPMiddleware):
    """
    Token gate for non-GET requests.

    The token is fixed when the middleware is constructed; nothing about it
    changes per request.
    """

    def __init__(self, app: ASGIApp, api_token: str):
        super().__init__(app)
        self._expected_header = f"Bearer {api_token}"

    def is_authorized(self, request: Request) -> bool:
        """Check whether the request may proceed."""
        if request.method.upper() in READ_ONLY_METHODS:
            return True

        provided = request.headers.get("Authorization")
        return bool(provided) and provided == self._expected_header

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self.is_authorized(request):
            logger.warning(f"Rejected {request.method} {request.url.path}: invalid API token")
            return PlainTextResponse(INVALID_TOKEN_MESSAGE, status_code=401)

        return await call_next(request)
