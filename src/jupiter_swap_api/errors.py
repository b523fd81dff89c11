"""Errors raised by the Jupiter swap API client.

Every failure falls into one of three kinds so callers can pick a recovery
policy per kind:

- TransportError: the request never completed (DNS, refused, timeout)
- StatusError: a response arrived with a non-2xx status
- DecodeError: a 2xx response body did not match the expected shape
"""

from typing import Optional


class JupiterSwapApiError(Exception):
    """Base class for all client errors."""
    pass


class TransportError(JupiterSwapApiError):
    """Raised when the request could not be sent or the response not received."""

    def __init__(
        self,
        cause: Exception,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.method = method
        self.url = url
        self.cause = cause
        if method and url:
            super().__init__(f"{method} {url} failed: {cause!r}")
        else:
            super().__init__(f"response could not be received: {cause!r}")


class StatusError(JupiterSwapApiError):
    """Raised when the service answers with a non-success HTTP status.

    Attributes:
        status_code: HTTP status returned by the service
        body: Response body text, or None if it could not be read
        body_error: Exception raised while reading the body, if any
    """

    def __init__(
        self,
        status_code: int,
        body: Optional[str] = None,
        body_error: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.body_error = body_error

        if body_error is not None:
            detail = f"body unavailable: {body_error!r}"
        else:
            detail = f"body: {body!r}"
        super().__init__(f"request status not ok: {status_code}, {detail}")

    @property
    def is_retryable(self) -> bool:
        """True for rate limiting and server-side failures."""
        return self.status_code == 429 or self.status_code >= 500


class DecodeError(JupiterSwapApiError):
    """Raised when a successful response body does not match the expected type."""

    def __init__(self, target: str, cause: Exception):
        self.target = target
        self.cause = cause
        super().__init__(f"failed to decode {target}: {cause}")
