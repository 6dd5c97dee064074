"""Security evaluation — API key, HTTP Basic/Bearer, OAuth2 and OpenID Connect checks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from starlette.requests import Request

from fastapi_openapi_mock._types import Document, Operation, SecurityScheme
from fastapi_openapi_mock.exceptions import AuthenticationError


class SchemeCheck(ABC):
    """Validates one security scheme against an incoming request."""

    @abstractmethod
    def check(self, request: Request) -> None:
        """Raise AuthenticationError with the failure reason if unsatisfied."""


class APIKeyCheck(SchemeCheck):
    """Requires a non-empty API key in a header, query parameter or cookie."""

    def __init__(self, name: str, location: str) -> None:
        self._name = name
        self._location = location

    def check(self, request: Request) -> None:
        if self._location == "header":
            value = request.headers.get(self._name)
        elif self._location == "query":
            value = request.query_params.get(self._name)
        elif self._location == "cookie":
            value = request.cookies.get(self._name)
        else:
            value = None

        if not value:
            raise AuthenticationError(
                f'Missing API key "{self._name}" in {self._location}'
            )


class HTTPAuthCheck(SchemeCheck):
    """Requires an Authorization header, prefixed for ``basic``/``bearer``."""

    def __init__(self, scheme: str | None) -> None:
        self._scheme = (scheme or "").lower()

    def check(self, request: Request) -> None:
        auth_value = request.headers.get("Authorization")
        if not auth_value:
            raise AuthenticationError("Missing Authorization header")

        if self._scheme in ("basic", "bearer"):
            prefix = f"{self._scheme} "
            if not auth_value.lower().startswith(prefix):
                raise AuthenticationError(
                    f"Authorization header must be {self._scheme.capitalize()}"
                )


class BearerTokenCheck(SchemeCheck):
    """OAuth2/OpenID Connect: only the Bearer prefix is checked, not the token."""

    def check(self, request: Request) -> None:
        auth_value = request.headers.get("Authorization")
        if not auth_value or not auth_value.lower().startswith("bearer "):
            raise AuthenticationError(
                "Missing or invalid Bearer token in Authorization header"
            )


class AllowAny(SchemeCheck):
    """Lenient pass-through for unknown scheme types and unresolved references."""

    def check(self, request: Request) -> None:
        pass


def scheme_check(scheme: SecurityScheme) -> SchemeCheck:
    if "$ref" in scheme:
        return AllowAny()

    scheme_type = scheme.get("type")
    if scheme_type == "apiKey":
        return APIKeyCheck(scheme.get("name", ""), scheme.get("in", ""))
    if scheme_type == "http":
        return HTTPAuthCheck(scheme.get("scheme"))
    if scheme_type in ("oauth2", "openIdConnect"):
        return BearerTokenCheck()
    return AllowAny()


def evaluate_security(
    request: Request, operation: Operation, document: Document
) -> None:
    """Raise AuthenticationError unless one security requirement is fully met.

    Requirements are alternatives tried in order (OR); the schemes named
    inside one requirement must all pass (AND). Operation-level ``security``
    replaces the document default, and an empty list disables auth.
    """
    security = operation.get("security")
    if security is None:
        security = document.get("security")
    if not security:
        return

    schemes = (document.get("components") or {}).get("securitySchemes") or {}
    failures: list[str] = []

    for requirement in security:
        reasons: list[str] = []
        for scheme_name in requirement:
            scheme = schemes.get(scheme_name)
            if scheme is None:
                reasons.append(
                    f'Security scheme "{scheme_name}" not found in'
                    " components/securitySchemes"
                )
                continue
            try:
                scheme_check(scheme).check(request)
            except AuthenticationError as exc:
                reasons.append(exc.detail)

        if not reasons:
            return

        failures.append(
            f"Requirement [{', '.join(requirement)}] failed: {'; '.join(reasons)}"
        )

    raise AuthenticationError(f"Authentication failed: {' OR '.join(failures)}")
