"""Shared pytest fixtures for fastapi-openapi-mock tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request

from fastapi_openapi_mock.context import SynthesisContext


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects from an ASGI scope."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        return Request(scope)

    return _make


@pytest.fixture
def ctx() -> SynthesisContext:
    """Seeded synthesis context."""
    return SynthesisContext.seeded(1234)


@pytest.fixture
def security_document() -> dict[str, Any]:
    """Document declaring one scheme of every supported kind."""
    return {
        "openapi": "3.0.0",
        "info": {"title": "Auth API", "version": "1.0.0"},
        "components": {
            "securitySchemes": {
                "apiKeyHeader": {"type": "apiKey", "in": "header", "name": "X-API-Key"},
                "apiKeyQuery": {"type": "apiKey", "in": "query", "name": "api_key"},
                "apiKeyCookie": {"type": "apiKey", "in": "cookie", "name": "session"},
                "basicAuth": {"type": "http", "scheme": "basic"},
                "bearerAuth": {"type": "http", "scheme": "bearer"},
                "oauth": {"type": "oauth2", "flows": {}},
                "oidc": {"type": "openIdConnect", "openIdConnectUrl": "https://x"},
                "mutual": {"type": "mutualTLS"},
            }
        },
        "paths": {},
    }


@pytest.fixture
def users_document() -> dict[str, Any]:
    """Small users API exercising bodies, headers, parameters and auth."""
    user_schema = {
        "type": "object",
        "properties": {
            "id": {"type": "integer", "minimum": 1, "maximum": 10000},
            "name": {"type": "string"},
            "email": {"type": "string", "format": "email"},
            "profile": {
                "type": "object",
                "properties": {"city": {"type": "string"}},
            },
        },
    }
    return {
        "openapi": "3.0.0",
        "info": {"title": "Users API", "version": "1.0.0"},
        "components": {
            "securitySchemes": {
                "apiKeyHeader": {"type": "apiKey", "in": "header", "name": "X-API-Key"},
                "basicAuth": {"type": "http", "scheme": "basic"},
            }
        },
        "paths": {
            "/users": {
                "get": {
                    "parameters": [
                        {"name": "page", "in": "query", "required": True},
                        {"name": "sort", "in": "query", "required": False},
                    ],
                    "responses": {
                        "200": {
                            "description": "List",
                            "headers": {
                                "X-Total-Count": {
                                    "schema": {"type": "integer", "example": 42}
                                },
                                "X-Request-Id": {"example": "req-1"},
                            },
                            "content": {
                                "application/json": {
                                    "schema": {
                                        "type": "array",
                                        "minItems": 3,
                                        "items": user_schema,
                                    }
                                }
                            },
                        }
                    },
                },
                "post": {
                    "responses": {
                        "400": {"description": "Bad request"},
                        "201": {
                            "description": "Created",
                            "content": {"application/json": {"schema": user_schema}},
                        },
                    },
                },
            },
            "/users/{userId}": {
                "get": {
                    "responses": {
                        "200": {
                            "description": "One user",
                            "content": {"application/json": {"schema": user_schema}},
                        }
                    }
                },
                "delete": {"responses": {"204": {"description": "Deleted"}}},
            },
            "/secure": {
                "get": {
                    "security": [{"apiKeyHeader": []}, {"basicAuth": []}],
                    "responses": {"200": {"description": "OK"}},
                }
            },
            "/errors-only": {
                "get": {
                    "responses": {
                        "404": {"description": "Missing"},
                        "400": {
                            "description": "Bad",
                            "content": {
                                "application/json": {
                                    "schema": {
                                        "type": "object",
                                        "properties": {
                                            "code": {"type": "string", "example": "E1"}
                                        },
                                    }
                                }
                            },
                        },
                    }
                }
            },
        },
    }
