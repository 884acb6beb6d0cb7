# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from typing import Any


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for failures outside the request/response cycle.

    Database initialisation and seeding raise subclasses of this; they are
    fatal at startup.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class SeedError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="SEED_FAILED", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging or API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }


# =============================================================================
# Actor List Parsing
# =============================================================================

def parse_actor_ids(value: str | None) -> list[int]:
    """
    Split a comma-joined actor id string into integers.

    Blank and non-numeric fragments are skipped; order and duplicates
    are preserved.

    Example:
        parse_actor_ids("1, 2,,x,3")  # [1, 2, 3]
    """
    if not value:
        return []

    ids = []
    for fragment in value.split(","):
        fragment = fragment.strip()
        if fragment.isdigit():
            ids.append(int(fragment))
    return ids
