"""FastAPI OpenAPI Mock - serve mock responses for every operation in OpenAPI 3 documents."""

from fastapi_openapi_mock.config import MockServerConfig
from fastapi_openapi_mock.context import SynthesisContext
from fastapi_openapi_mock.dispatcher import create_app, register_routes
from fastapi_openapi_mock.exceptions import (
    AuthenticationError,
    EmptyInputError,
    MockServerException,
    ParseError,
    RequestRejected,
    ValidationError,
)
from fastapi_openapi_mock.loader import load_specs_from_path
from fastapi_openapi_mock.merge import merge_specs
from fastapi_openapi_mock.responses import SelectedResponse, select_response
from fastapi_openapi_mock.security import evaluate_security
from fastapi_openapi_mock.shaping import merge_request_body
from fastapi_openapi_mock.synthesis import ValueSynthesizer, synthesize

__all__ = [
    "AuthenticationError",
    "EmptyInputError",
    "MockServerConfig",
    "MockServerException",
    "ParseError",
    "RequestRejected",
    "SelectedResponse",
    "SynthesisContext",
    "ValidationError",
    "ValueSynthesizer",
    "create_app",
    "evaluate_security",
    "load_specs_from_path",
    "merge_request_body",
    "merge_specs",
    "register_routes",
    "select_response",
    "synthesize",
]
