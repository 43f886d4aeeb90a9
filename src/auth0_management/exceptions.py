"""
Exception hierarchy for the management API client.

Request construction problems (``TemplateError``, ``MappingError``) are raised
before any network traffic happens. Everything the server reports is carried
by an ``ApiError`` subclass that keeps the status code and the raw body
untouched, and ``DeserializationError`` covers responses whose body does not
match the expected shape.
"""

from typing import Any, Dict, Mapping, Optional


class ManagementApiError(Exception):
    """
    Base exception for all management client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: API error code (e.g., "invalid_body")
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


# =============================================================================
# Request Construction Errors
# =============================================================================


class TemplateError(ManagementApiError):
    """
    A path template placeholder has no value.

    Raised while building the request, so no network call is made.
    """

    def __init__(
        self,
        placeholder: str,
        template: str,
        *,
        message: Optional[str] = None,
    ):
        super().__init__(
            message or f"No value supplied for path parameter '{placeholder}' in '{template}'",
            details={"placeholder": placeholder, "template": template},
        )
        self.placeholder = placeholder
        self.template = template


class MappingError(ManagementApiError):
    """An enumeration member has no declared wire name, or a token has no member."""

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class DeserializationError(ManagementApiError):
    """
    The response body does not match the expected shape.

    The raw body text and status code are kept for diagnostics.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            details=details,
        )
        self.body = body


# =============================================================================
# API Errors (non-success status codes)
# =============================================================================


class ApiError(ManagementApiError):
    """
    The API answered with a non-success status code.

    Attributes:
        body: The response body, parsed as JSON when possible, else raw text
        headers: The response headers
    """

    def __init__(
        self,
        message: str = "API request failed",
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )
        self.body = body
        self.headers = dict(headers or {})


class BadRequestError(ApiError):
    """The request body or query string was rejected (400)."""

    def __init__(self, message: str = "Bad request", *, status_code: int = 400, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class AuthenticationError(ApiError):
    """
    The access token is missing, invalid or expired (401).

    Token acquisition is left to the caller; nothing is refreshed here.
    """

    def __init__(self, message: str = "Authentication required", *, status_code: int = 401, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class AuthorizationError(ApiError):
    """The token lacks the scope required by the operation (403)."""

    def __init__(self, message: str = "Access denied", *, status_code: int = 403, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class NotFoundError(ApiError):
    """Requested resource was not found (404)."""

    def __init__(self, message: str = "Resource not found", *, status_code: int = 404, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class ConflictError(ApiError):
    """Request conflicts with current state of the resource (409)."""

    def __init__(self, message: str = "Resource conflict", *, status_code: int = 409, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class RateLimitError(ApiError):
    """
    Rate limit exceeded (429).

    The ``X-RateLimit-*`` header values are exposed as attributes; waiting and
    retrying is up to the caller.
    """

    def __init__(self, message: str = "Rate limit exceeded", *, status_code: int = 429, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)
        self.limit = _int_header(self.headers, "x-ratelimit-limit")
        self.remaining = _int_header(self.headers, "x-ratelimit-remaining")
        self.reset = _int_header(self.headers, "x-ratelimit-reset")


class ServerError(ApiError):
    """Server-side error occurred (5xx)."""

    def __init__(self, message: str = "Server error", *, status_code: int = 500, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(ManagementApiError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    transport failure before a response was received.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Exception Mapping
# =============================================================================

STATUS_CODE_EXCEPTIONS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def _int_header(headers: Mapping[str, str], name: str) -> Optional[int]:
    for key, value in headers.items():
        if key.lower() == name:
            try:
                return int(value)
            except (TypeError, ValueError):
                return None
    return None


def exception_from_response(
    status_code: int,
    body: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> ApiError:
    """
    Create the matching ``ApiError`` for a failed response.

    Error bodies shaped like ``{"statusCode", "error", "message", "errorCode"}``
    provide the message and error code; any other body is kept as-is.

    Args:
        status_code: HTTP status code
        body: Response body (parsed JSON or raw text)
        headers: Response headers

    Returns:
        Appropriate ApiError subclass
    """
    message = f"HTTP {status_code}"
    error_code = None
    if isinstance(body, dict):
        message = str(body.get("message") or body.get("error") or message)
        error_code = body.get("errorCode")
    elif isinstance(body, str) and body:
        message = body

    if 500 <= status_code < 600:
        exception_class = ServerError
    else:
        exception_class = STATUS_CODE_EXCEPTIONS.get(status_code, ApiError)

    return exception_class(
        message,
        status_code=status_code,
        error_code=error_code,
        body=body,
        headers=headers,
    )
