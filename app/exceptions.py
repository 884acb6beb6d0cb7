# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors tell the client HOW to fix the request, not just WHAT failed.
#
# Write conflicts are deliberately absent here: the store reports them as a
# result value and the routers answer 204 No Content.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class MovieApiException(Exception):
    """
    Base exception for the Movie API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "MOVIE_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Not Found Exceptions
# =============================================================================

class ResourceNotFoundError(MovieApiException):
    """Raised when no record exists at the requested id."""

    resource = "Resource"
    error_code = "RESOURCE_NOT_FOUND"
    collection = ""

    def __init__(self, record_id: int):
        super().__init__(
            message=f"{self.resource} not found: {record_id}",
            code=self.error_code,
            status_code=404,
            suggestion=f"List existing records with GET /api/{self.collection}",
            details={"id": record_id}
        )


class MovieNotFoundError(ResourceNotFoundError):
    """Raised when a movie id doesn't exist."""
    resource = "Movie"
    error_code = "MOVIE_NOT_FOUND"
    collection = "movies"


class ActorNotFoundError(ResourceNotFoundError):
    """Raised when an actor id doesn't exist."""
    resource = "Actor"
    error_code = "ACTOR_NOT_FOUND"
    collection = "actors"


class MovieRatingNotFoundError(ResourceNotFoundError):
    """Raised when a movie rating id doesn't exist."""
    resource = "Movie rating"
    error_code = "MOVIE_RATING_NOT_FOUND"
    collection = "movieratings"


# =============================================================================
# Request Exceptions
# =============================================================================

class MissingBodyError(MovieApiException):
    """Raised when a create request has no body."""

    def __init__(self, resource: str):
        super().__init__(
            message=f"Request body is required to create a {resource}",
            code="MISSING_BODY",
            status_code=400,
            suggestion="Send the record as a JSON object in the request body",
            details={"resource": resource}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def movie_api_exception_handler(
    request: Request,
    exc: MovieApiException
) -> JSONResponse:
    """
    Convert MovieApiException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Malformed bodies are a client error like a missing body, so they get
    400 rather than FastAPI's default 422.
    """
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": jsonable_encoder(exc.errors()),
        }
    )
