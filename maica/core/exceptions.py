"""Custom exception hierarchy for MAICA.

Error codes follow pattern: [CATEGORY][NUMBER]
- USR: User/Auth errors (100-199)
- TAX: Tax errors (300-399)

The tax engine itself never raises for bad numbers (it coerces them to zero);
these exceptions belong to the HTTP boundary.
"""

from __future__ import annotations

from typing import Any


class MaicaException(Exception):
    """Base exception for all MAICA application errors.

    All custom exceptions inherit from this to enable centralized error handling.
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with user-friendly message and metadata.

        Args:
            message: User-friendly error message
            code: Unique error code (e.g., "TAX300")
            status_code: HTTP status code (default: 400 Bad Request)
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            }
        }


# ============================================================================
# USER/AUTH ERRORS (USR100-199)
# ============================================================================

class AuthError(MaicaException):
    """Base class for authentication errors."""
    pass


class MissingTokenError(AuthError):
    """Request carried no Bearer token."""

    def __init__(self):
        super().__init__(
            message="No token provided",
            code="USR100",
            status_code=401,
        )


class InvalidTokenError(AuthError):
    """Bearer token failed signature, expiry or claim checks."""

    def __init__(self, reason: str | None = None):
        super().__init__(
            message="Invalid or expired token",
            code="USR101",
            status_code=401,
            details={"reason": reason} if reason else {},
        )


# ============================================================================
# TAX ERRORS (TAX300-399)
# ============================================================================

class TaxError(MaicaException):
    """Base class for tax errors."""
    pass


class TaxCalculationError(TaxError):
    """Unexpected failure while serving a tax estimate."""

    def __init__(self, message: str = "Failed to calculate taxes", endpoint: str | None = None):
        super().__init__(
            message=message,
            code="TAX300",
            status_code=500,
            details={"endpoint": endpoint} if endpoint else {},
        )
