# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides the shared-secret token gate for mutating requests.
#
# Usage:
#   from app.auth import ApiTokenMiddleware
#   app.add_middleware(ApiTokenMiddleware, api_token=settings.API_TOKEN)
# =============================================================================

from app.auth.api_token import ApiTokenMiddleware, INVALID_TOKEN_MESSAGE

__all__ = [
    "ApiTokenMiddleware",
    "INVALID_TOKEN_MESSAGE",
]
