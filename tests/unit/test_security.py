"""Tests for security evaluation."""

from __future__ import annotations

from typing import Any

import pytest

from fastapi_openapi_mock.exceptions import AuthenticationError
from fastapi_openapi_mock.security import (
    AllowAny,
    APIKeyCheck,
    BearerTokenCheck,
    HTTPAuthCheck,
    evaluate_security,
    scheme_check,
)


def _operation(*requirements: dict[str, list[str]]) -> dict[str, Any]:
    return {"security": list(requirements), "responses": {}}


class TestAPIKeyCheck:
    def test_header(self, make_request: Any) -> None:
        check = APIKeyCheck("X-API-Key", "header")
        check.check(make_request(headers={"X-API-Key": "key-123"}))

    def test_header_missing(self, make_request: Any) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            APIKeyCheck("X-API-Key", "header").check(make_request())
        assert exc_info.value.detail == 'Missing API key "X-API-Key" in header'

    def test_empty_value_is_missing(self, make_request: Any) -> None:
        with pytest.raises(AuthenticationError):
            APIKeyCheck("X-API-Key", "header").check(
                make_request(headers={"X-API-Key": ""})
            )

    def test_query(self, make_request: Any) -> None:
        APIKeyCheck("api_key", "query").check(make_request(query_string="api_key=k"))

    def test_query_missing(self, make_request: Any) -> None:
        with pytest.raises(AuthenticationError, match='"api_key" in query'):
            APIKeyCheck("api_key", "query").check(make_request(query_string="other=1"))

    def test_cookie(self, make_request: Any) -> None:
        request = make_request(headers={"cookie": "session=abc123"})
        APIKeyCheck("session", "cookie").check(request)

    def test_cookie_missing(self, make_request: Any) -> None:
        with pytest.raises(AuthenticationError, match='"session" in cookie'):
            APIKeyCheck("session", "cookie").check(make_request())


class TestHTTPAuthCheck:
    def test_basic(self, make_request: Any) -> None:
        HTTPAuthCheck("basic").check(
            make_request(headers={"Authorization": "Basic dGVzdDp0ZXN0"})
        )

    def test_basic_prefix_is_case_insensitive(self, make_request: Any) -> None:
        HTTPAuthCheck("Basic").check(make_request(headers={"Authorization": "basic x"}))

    def test_basic_rejects_bearer(self, make_request: Any) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            HTTPAuthCheck("basic").check(
                make_request(headers={"Authorization": "Bearer dGVzdA=="})
            )
        assert exc_info.value.detail == "Authorization header must be Basic"

    def test_bearer(self, make_request: Any) -> None:
        HTTPAuthCheck("bearer").check(
            make_request(headers={"Authorization": "Bearer token"})
        )

    def test_bearer_rejects_basic(self, make_request: Any) -> None:
        with pytest.raises(AuthenticationError, match="must be Bearer"):
            HTTPAuthCheck("bearer").check(
                make_request(headers={"Authorization": "Basic creds"})
            )

    def test_missing_header(self, make_request: Any) -> None:
        with pytest.raises(AuthenticationError, match="Missing Authorization header"):
            HTTPAuthCheck("basic").check(make_request())

    def test_other_scheme_needs_only_header(self, make_request: Any) -> None:
        HTTPAuthCheck("digest").check(make_request(headers={"Authorization": "Digest x"}))


class TestBearerTokenCheck:
    def test_bearer_token(self, make_request: Any) -> None:
        BearerTokenCheck().check(make_request(headers={"Authorization": "Bearer t"}))

    @pytest.mark.parametrize("headers", [{}, {"Authorization": "Basic creds"}])
    def test_rejects(self, make_request: Any, headers: dict[str, str]) -> None:
        with pytest.raises(AuthenticationError, match="Bearer token"):
            BearerTokenCheck().check(make_request(headers=headers))


class TestSchemeCheckFactory:
    @pytest.mark.parametrize(
        ("scheme", "expected"),
        [
            ({"type": "apiKey", "in": "header", "name": "k"}, APIKeyCheck),
            ({"type": "http", "scheme": "basic"}, HTTPAuthCheck),
            ({"type": "oauth2"}, BearerTokenCheck),
            ({"type": "openIdConnect"}, BearerTokenCheck),
            ({"type": "mutualTLS"}, AllowAny),
            ({"$ref": "#/components/securitySchemes/x"}, AllowAny),
        ],
    )
    def test_dispatch(self, scheme: dict[str, Any], expected: type) -> None:
        assert isinstance(scheme_check(scheme), expected)


class TestEvaluateSecurity:
    def test_no_security_passes(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        evaluate_security(make_request(), {"responses": {}}, security_document)

    def test_empty_operation_security_overrides_document(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        security_document["security"] = [{"apiKeyHeader": []}]
        evaluate_security(make_request(), _operation(), security_document)

    def test_document_default_applies(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        security_document["security"] = [{"apiKeyHeader": []}]
        with pytest.raises(AuthenticationError):
            evaluate_security(make_request(), {"responses": {}}, security_document)

    def test_or_second_alternative_passes(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        operation = _operation({"apiKeyHeader": []}, {"basicAuth": []})
        request = make_request(headers={"Authorization": "Basic dGVzdDp0ZXN0"})
        evaluate_security(request, operation, security_document)

    def test_or_first_alternative_passes(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        operation = _operation({"apiKeyHeader": []}, {"basicAuth": []})
        evaluate_security(
            make_request(headers={"X-API-Key": "k"}), operation, security_document
        )

    def test_or_all_fail(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        operation = _operation({"apiKeyHeader": []}, {"basicAuth": []})
        with pytest.raises(AuthenticationError) as exc_info:
            evaluate_security(make_request(), operation, security_document)
        assert exc_info.value.detail == (
            "Authentication failed: "
            'Requirement [apiKeyHeader] failed: Missing API key "X-API-Key" in header'
            " OR Requirement [basicAuth] failed: Missing Authorization header"
        )

    def test_and_requires_every_scheme(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        operation = _operation({"apiKeyHeader": [], "apiKeyQuery": []})
        request = make_request(headers={"X-API-Key": "k"})
        with pytest.raises(AuthenticationError) as exc_info:
            evaluate_security(request, operation, security_document)
        assert "Requirement [apiKeyHeader, apiKeyQuery] failed" in exc_info.value.detail
        assert '"api_key" in query' in exc_info.value.detail

    def test_and_all_present(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        operation = _operation({"apiKeyHeader": [], "apiKeyQuery": []})
        request = make_request(headers={"X-API-Key": "k"}, query_string="api_key=q")
        evaluate_security(request, operation, security_document)

    def test_and_reasons_joined_with_semicolon(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        operation = _operation({"apiKeyHeader": [], "bearerAuth": []})
        with pytest.raises(AuthenticationError) as exc_info:
            evaluate_security(make_request(), operation, security_document)
        assert (
            'Missing API key "X-API-Key" in header; Missing Authorization header'
            in exc_info.value.detail
        )

    def test_missing_scheme_fails_requirement(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            evaluate_security(
                make_request(), _operation({"ghost": []}), security_document
            )
        assert 'Security scheme "ghost" not found' in exc_info.value.detail

    def test_missing_scheme_without_components(self, make_request: Any) -> None:
        document = {"openapi": "3.0.0", "info": {}, "paths": {}}
        with pytest.raises(AuthenticationError, match="not found"):
            evaluate_security(make_request(), _operation({"ghost": []}), document)

    def test_missing_scheme_can_be_bypassed_by_alternative(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        operation = _operation({"ghost": []}, {"bearerAuth": []})
        request = make_request(headers={"Authorization": "Bearer t"})
        evaluate_security(request, operation, security_document)

    def test_empty_requirement_is_satisfied(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        operation = _operation({"apiKeyHeader": []}, {})
        evaluate_security(make_request(), operation, security_document)

    def test_unknown_scheme_type_is_lenient(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        evaluate_security(make_request(), _operation({"mutual": []}), security_document)

    def test_oauth2_and_oidc(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        request = make_request(headers={"Authorization": "Bearer abc"})
        evaluate_security(request, _operation({"oauth": [], "oidc": []}), security_document)
        with pytest.raises(AuthenticationError):
            evaluate_security(make_request(), _operation({"oauth": []}), security_document)

    def test_cookie_scheme(
        self, make_request: Any, security_document: dict[str, Any]
    ) -> None:
        request = make_request(headers={"cookie": "session=s1"})
        evaluate_security(request, _operation({"apiKeyCookie": []}), security_document)
