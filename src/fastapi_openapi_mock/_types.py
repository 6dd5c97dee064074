"""Shared type aliases for parsed OpenAPI documents."""

from __future__ import annotations

from typing import Any

# Parsed documents are the plain mappings produced by YAML/JSON loading
Document = dict[str, Any]
PathItem = dict[str, Any]
Operation = dict[str, Any]
Parameter = dict[str, Any]
Response = dict[str, Any]
SchemaObject = dict[str, Any]
SecurityRequirement = dict[str, list[str]]
SecurityScheme = dict[str, Any]

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "options", "head")
