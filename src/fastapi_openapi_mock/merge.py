"""Spec merging — combine several documents into one API surface."""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from typing import Any

from fastapi_openapi_mock._types import HTTP_METHODS, Document, PathItem
from fastapi_openapi_mock.exceptions import EmptyInputError

MERGED_TITLE = "Merged API Specifications"
MERGED_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def merge_specs(
    specs: Sequence[Document], *, log: logging.Logger | None = None
) -> Document:
    """Merge documents: first-wins for paths, last-wins for components.

    A single document is returned unchanged. Admitted path items are deep
    copies, tagged with their origin title; inputs are never mutated.
    """
    if not specs:
        raise EmptyInputError()

    log = log or logger

    if len(specs) == 1:
        return specs[0]

    merged: Document = {
        "openapi": specs[0].get("openapi"),
        "info": {"title": MERGED_TITLE, "version": MERGED_VERSION},
        "paths": {},
    }
    components: dict[str, dict[str, Any]] = {}
    tags: list[dict[str, Any]] = []

    for spec in specs:
        title = (spec.get("info") or {}).get("title")
        default_security = spec.get("security")

        for path, path_item in (spec.get("paths") or {}).items():
            if not path_item:
                continue
            if path in merged["paths"]:
                log.warning(
                    "Duplicate path found: %s - using first occurrence", path
                )
                continue
            merged["paths"][path] = _admit_path_item(
                path_item, title, default_security
            )

        # Later definitions overwrite earlier ones
        for section, entries in (spec.get("components") or {}).items():
            if isinstance(entries, dict):
                components.setdefault(section, {}).update(entries)

        for tag in spec.get("tags") or []:
            _add_tag(tags, tag)
        if title:
            _add_tag(tags, {"name": title, "description": f"Endpoints from {title}"})

    if components:
        merged["components"] = components
    if tags:
        merged["tags"] = tags
    return merged


def _admit_path_item(
    path_item: PathItem, title: str | None, default_security: Any
) -> PathItem:
    admitted = copy.deepcopy(path_item)
    for method, operation in admitted.items():
        if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
            continue
        if title:
            op_tags = operation.setdefault("tags", [])
            if title not in op_tags:
                op_tags.append(title)
        if default_security is not None and "security" not in operation:
            operation["security"] = copy.deepcopy(default_security)
    return admitted


def _add_tag(tags: list[dict[str, Any]], tag: dict[str, Any]) -> None:
    name = tag.get("name")
    if name and all(existing.get("name") != name for existing in tags):
        tags.append(dict(tag))
