"""MockServerException hierarchy for startup failures and rejected requests."""

from __future__ import annotations


class MockServerException(Exception):
    """Base for all mock server exceptions."""


class ParseError(MockServerException):
    """Spec loading or merging failed. Raised before any route is live."""


class EmptyInputError(ParseError):
    """Nothing to merge."""

    def __init__(self, detail: str = "No specs to merge") -> None:
        super().__init__(detail)


class RequestRejected(MockServerException):
    """Controlled per-request abort with HTTP status code and detail."""

    def __init__(self, detail: str, *, status_code: int = 400) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class ValidationError(RequestRejected):
    """Request does not satisfy the operation's declared inputs (400)."""


class AuthenticationError(RequestRejected):
    """No security requirement of the operation was satisfied (400)."""

    def __init__(self, detail: str = "Authentication failed") -> None:
        super().__init__(detail, status_code=400)
