"""Response selection — which declared response a mock request serves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi_openapi_mock._types import Operation, Response

NO_RESPONSES: Response = {"description": "No response defined"}
DEFAULT_RESPONSE: Response = {"description": "Default response"}


@dataclass(frozen=True)
class SelectedResponse:
    response: Response
    status_code: int


def _is_reference(value: Any) -> bool:
    return not isinstance(value, dict) or "$ref" in value


def select_response(operation: Operation) -> SelectedResponse:
    """Pick the lowest 2xx response, else the lowest numeric one, else ``default``.

    Status keys are compared as strings of exactly three digits; YAML integer
    keys are normalised first. ``$ref``-only entries count as absent.
    """
    responses = operation.get("responses")
    if not responses:
        return SelectedResponse(NO_RESPONSES, 200)

    numeric: dict[int, Response] = {}
    for key, response in responses.items():
        code = str(key)
        if len(code) == 3 and code.isdigit() and not _is_reference(response):
            numeric[int(code)] = response

    if not numeric:
        default = responses.get("default")
        if default is None or _is_reference(default):
            return SelectedResponse(DEFAULT_RESPONSE, 200)
        return SelectedResponse(default, 200)

    success = sorted(code for code in numeric if 200 <= code < 300)
    status_code = success[0] if success else min(numeric)
    return SelectedResponse(numeric[status_code], status_code)
