"""Typed carrier failures.

Each failure carries an ``error_code`` so the quote service can hand callers
a value they can branch on (retry vs. give up) without inspecting messages.
"""


class CarrierError(Exception):
    """Base class for every carrier integration failure."""

    error_code = "CARRIER_ERROR"
    retryable = True

    def __init__(self, message: str, status_code: int | None = None, details=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class InvalidApiKey(CarrierError):
    error_code = "INVALID_API_KEY"
    retryable = False

    def __init__(self, message: str = "Invalid API key"):
        super().__init__(message, status_code=401)


class RateLimitExceeded(CarrierError):
    error_code = "RATE_LIMIT_EXCEEDED"
    retryable = False

    def __init__(self, message: str = "Rate limit exceeded", retry_after: float | None = None):
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class CarrierValidationError(CarrierError):
    """The carrier rejected the request payload (HTTP 422)."""

    error_code = "VALIDATION_ERROR"
    retryable = False

    def __init__(self, message: str = "Validation error", details=None):
        super().__init__(message, status_code=422, details=details)


class HttpError(CarrierError):
    error_code = "HTTP_ERROR"

    def __init__(self, status_code: int, message: str | None = None):
        super().__init__(message or f"HTTP {status_code}", status_code=status_code)


class RequestFailed(CarrierError):
    """All attempts were used up without a successful response."""

    error_code = "REQUEST_FAILED"
    retryable = False

    def __init__(self, attempts: int, last_error: Exception | None = None):
        reason = getattr(last_error, "message", None) or str(last_error or "unknown error")
        super().__init__(f"Request failed after {attempts} attempts: {reason}")
        self.attempts = attempts
        self.last_error = last_error
