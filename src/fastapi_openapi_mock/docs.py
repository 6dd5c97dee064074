"""Interactive documentation — Swagger UI over the merged document."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse

from fastapi_openapi_mock._types import Document


def mount_docs(app: FastAPI, document: Document, *, path: str = "/api-docs") -> None:
    """Serve ``document`` as is at ``<path>/openapi.json`` and Swagger UI at ``path``."""
    openapi_url = f"{path}/openapi.json"
    title = (document.get("info") or {}).get("title", "Mock API")
    schema = jsonable_encoder(document)

    async def openapi_json() -> JSONResponse:
        return JSONResponse(schema)

    async def swagger_ui() -> HTMLResponse:
        return get_swagger_ui_html(openapi_url=openapi_url, title=f"{title} - Docs")

    app.add_api_route(
        openapi_url, openapi_json, methods=["GET"], include_in_schema=False
    )
    app.add_api_route(path, swagger_ui, methods=["GET"], include_in_schema=False)
