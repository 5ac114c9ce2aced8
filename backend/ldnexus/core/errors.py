"""API error classes.

Every error leaving the HTTP layer is rendered as
{"error": {"code", "message", "details"}} by the handlers in main.py.
Scoring itself never raises to callers: these cover requests the matchers
cannot serve, such as a filter naming an unknown sector.
"""


class APIError(Exception):
    """Base class for API errors.

    Attributes:
        code: Machine-readable error code (e.g., "VALIDATION_ERROR").
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional list of additional error details.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: list[dict] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ValidationError(APIError):
    """Request is well-formed JSON but cannot be matched (400).

    Raised for filter values outside the known UAE vocabulary. Schema
    violations are reported by FastAPI's RequestValidationError handler
    with the same code.
    """

    def __init__(
        self,
        message: str,
        details: list[dict] | None = None,
    ) -> None:
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            status_code=400,
            details=details,
        )
