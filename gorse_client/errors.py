"""Error hierarchy for failed Gorse API calls.

Every failure raised by the client is a ``GorseError``. Callers that care
about the HTTP outcome branch on ``status_code``; it is ``None`` when the
request never produced a response.
"""


class GorseError(Exception):
    """Base exception for all Gorse client errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )


class GorseConnectionError(GorseError):
    """No HTTP response was obtained (refused, DNS, protocol failure)."""

    def __init__(self, method: str, path: str, reason: str) -> None:
        super().__init__(f"{method} {path} failed: {reason}", None, reason)
        self.method = method
        self.path = path


class GorseTimeoutError(GorseConnectionError):
    """The request timed out before a response arrived."""


class GorseHTTPError(GorseError):
    """The server answered with a non-success status code."""

    def __init__(self, method: str, path: str, status_code: int, body: str) -> None:
        super().__init__(
            f"{method} {path} returned HTTP {status_code}: {body}",
            status_code,
            body,
        )
        self.method = method
        self.path = path


class GorseDecodeError(GorseError):
    """The response body could not be parsed as JSON."""

    def __init__(self, method: str, path: str, status_code: int, body: str) -> None:
        super().__init__(
            f"{method} {path} returned a non-JSON body (HTTP {status_code})",
            status_code,
            body,
        )
        self.method = method
        self.path = path
