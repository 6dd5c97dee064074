"""Route dispatch — build a FastAPI app serving mock responses for every operation."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from fastapi_openapi_mock._types import (
    HTTP_METHODS,
    Document,
    Operation,
    Parameter,
    PathItem,
)
from fastapi_openapi_mock.config import MockServerConfig
from fastapi_openapi_mock.context import SynthesisContext
from fastapi_openapi_mock.docs import mount_docs
from fastapi_openapi_mock.exceptions import RequestRejected, ValidationError
from fastapi_openapi_mock.responses import select_response
from fastapi_openapi_mock.security import evaluate_security
from fastapi_openapi_mock.shaping import merge_request_body
from fastapi_openapi_mock.synthesis import ValueSynthesizer

Handler = Callable[[Request], Awaitable[Response]]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, PATCH, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}
NOT_FOUND_MESSAGE = "The requested endpoint does not exist"

# Status codes that must not carry a body
BODILESS_STATUS = (204, 304)

_PLACEHOLDER = re.compile(r"{([^}]+)}")

logger = logging.getLogger(__name__)


def create_app(
    document: Document,
    *,
    config: MockServerConfig | None = None,
    ctx: SynthesisContext | None = None,
) -> FastAPI:
    """Build the mock server app for a merged document."""
    config = config or MockServerConfig()
    if ctx is None:
        ctx = (
            SynthesisContext.seeded(config.seed)
            if config.seed is not None
            else SynthesisContext()
        )

    title = (document.get("info") or {}).get("title", "Mock API")
    app = FastAPI(title=title, docs_url=None, redoc_url=None, openapi_url=None)

    _install_error_handlers(app)
    mount_docs(app, document, path=config.docs_path)
    register_routes(app, document, ctx=ctx)
    return app


def register_routes(
    app: FastAPI, document: Document, *, ctx: SynthesisContext
) -> int:
    """Register one route per path × method plus an OPTIONS route per path.

    Returns the number of operation routes registered.
    """
    synthesizer = ValueSynthesizer(ctx)
    count = 0

    for path, path_item in (document.get("paths") or {}).items():
        if not path_item:
            continue

        route_path = convert_path(path)
        methods = [
            method
            for method, operation in path_item.items()
            if method.lower() in HTTP_METHODS and isinstance(operation, dict)
        ]

        for method in methods:
            operation = path_item[method]
            parameters = collect_parameters(path_item, operation)
            app.add_api_route(
                route_path,
                make_operation_handler(operation, parameters, document, synthesizer),
                methods=[method.upper()],
                include_in_schema=False,
            )
            logger.debug("Registered %s %s", method.upper(), route_path)
            count += 1

        if methods and "options" not in (m.lower() for m in methods):
            app.add_api_route(
                route_path,
                make_options_handler(methods),
                methods=["OPTIONS"],
                include_in_schema=False,
            )

    logger.info("Registered %d mock operation(s)", count)
    return count


def convert_path(openapi_path: str) -> str:
    """Rewrite ``{param}`` placeholders into Starlette path parameters.

    Names are reduced to identifiers Starlette accepts; each placeholder stays
    a named capture of one path segment.
    """
    seen: set[str] = set()

    def replace(match: re.Match[str]) -> str:
        name = re.sub(r"[^a-zA-Z0-9_]", "_", match.group(1))
        if not name or name[0].isdigit():
            name = f"_{name}"
        candidate, suffix = name, 2
        while candidate in seen:
            candidate = f"{name}_{suffix}"
            suffix += 1
        seen.add(candidate)
        return "{" + candidate + "}"

    return _PLACEHOLDER.sub(replace, openapi_path)


def collect_parameters(path_item: PathItem, operation: Operation) -> list[Parameter]:
    """Path-level parameters overridden by operation-level ones on ``(name, in)``."""
    merged: dict[tuple[Any, Any], Parameter] = {}
    declared = [
        *(path_item.get("parameters") or []),
        *(operation.get("parameters") or []),
    ]
    for param in declared:
        if isinstance(param, dict) and "$ref" not in param:
            merged[(param.get("name"), param.get("in"))] = param
    return list(merged.values())


def validate_required_query(request: Request, parameters: list[Parameter]) -> None:
    for param in parameters:
        if param.get("in") != "query" or not param.get("required"):
            continue
        name = param.get("name")
        if not name:
            continue
        if not request.query_params.get(name):
            raise ValidationError(f"Missing required query parameter: {name}")


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token}")


async def read_json_body(request: Request) -> Any:
    """Parsed JSON body, or None when the request carries no JSON payload."""
    if "json" not in request.headers.get("content-type", ""):
        return None
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise ValidationError("Malformed JSON request body") from None


def make_operation_handler(
    operation: Operation,
    parameters: list[Parameter],
    document: Document,
    synthesizer: ValueSynthesizer,
) -> Handler:
    async def handler(request: Request) -> Response:
        try:
            evaluate_security(request, operation, document)
            validate_required_query(request, parameters)
            request_body = await read_json_body(request)
        except RequestRejected as exc:
            logger.info(
                "Rejected %s %s: %s", request.method, request.url.path, exc.detail
            )
            return JSONResponse({"error": exc.detail}, status_code=exc.status_code)

        selected = select_response(operation)
        if selected.status_code in BODILESS_STATUS:
            return Response(
                status_code=selected.status_code,
                headers=synthesizer.response_headers(selected.response),
            )

        body = synthesizer.response_body(selected.response)
        headers = synthesizer.response_headers(selected.response)
        if request_body is not None:
            body = merge_request_body(body, request_body)

        return JSONResponse(
            jsonable_encoder(body),
            status_code=selected.status_code,
            headers=headers,
        )

    return handler


def make_options_handler(methods: list[str]) -> Handler:
    allow_methods = ", ".join(method.upper() for method in methods)

    async def handler(request: Request) -> Response:
        return PlainTextResponse(
            "OK", headers={"Access-Control-Allow-Methods": allow_methods}
        )

    return handler


def _install_error_handlers(app: FastAPI) -> None:
    async def not_found(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code in (404, 405):
            return JSONResponse(
                {"error": "Not Found", "message": NOT_FOUND_MESSAGE}, status_code=404
            )
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code)

    app.add_exception_handler(StarletteHTTPException, not_found)  # type: ignore[arg-type]

    # Added first so the CORS middleware wraps error responses too
    @app.middleware("http")
    async def internal_error(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unhandled error on %s %s", request.method, request.url.path
            )
            return JSONResponse(
                {"error": "Internal Server Error", "message": str(exc)},
                status_code=500,
            )

    @app.middleware("http")
    async def cors_headers(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
