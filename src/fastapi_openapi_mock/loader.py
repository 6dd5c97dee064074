"""Spec loading — resolve a file or directory path to parsed OpenAPI documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from fastapi_openapi_mock._types import Document
from fastapi_openapi_mock.exceptions import ParseError

SPEC_EXTENSIONS = (".yaml", ".yml", ".json")

logger = logging.getLogger(__name__)


def is_spec_file(path: Path) -> bool:
    return path.suffix.lower() in SPEC_EXTENSIONS


def find_spec_files(directory: Path) -> list[Path]:
    """Recursively collect spec files under ``directory`` in sorted order."""
    return sorted(
        path for path in directory.rglob("*") if path.is_file() and is_spec_file(path)
    )


def load_specs_from_path(spec_path: str | Path) -> list[Document]:
    """Load one document from a file, or every valid document under a directory."""
    path = Path(spec_path)

    if path.is_file():
        if not is_spec_file(path):
            raise ParseError(
                "File must be an OpenAPI spec file (.yaml, .yml, or .json)"
            )
        return [parse_spec_file(path)]

    if path.is_dir():
        spec_files = find_spec_files(path)
        if not spec_files:
            raise ParseError(f"No OpenAPI spec files found in directory: {spec_path}")

        specs: list[Document] = []
        for spec_file in spec_files:
            try:
                specs.append(parse_spec_file(spec_file))
            except ParseError as exc:
                logger.warning("Skipped invalid spec: %s (%s)", spec_file, exc)
                continue
            logger.info("Loaded spec from: %s", spec_file)

        if not specs:
            raise ParseError("No valid OpenAPI specs found")
        return specs

    raise ParseError(f"Path not found: {spec_path}")


def parse_spec_file(path: Path) -> Document:
    """Parse a YAML or JSON file, check its shape and inline local references."""
    try:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
        _check_structure(document)
        return dereference(document)
    except (OSError, yaml.YAMLError, ValueError, LookupError) as exc:
        raise ParseError(f"Failed to parse OpenAPI specification: {exc}") from exc


def _check_structure(document: Any) -> None:
    if not isinstance(document, dict):
        raise ValueError("document root must be a mapping")
    version = str(document.get("openapi", ""))
    if not version.startswith("3."):
        raise ValueError(f"unsupported OpenAPI version: {version!r}")
    if not isinstance(document.get("info"), dict):
        raise ValueError("missing info object")
    if not isinstance(document.get("paths"), dict):
        raise ValueError("missing paths object")


def resolve_ref(document: Document, ref: str) -> Any:
    """Resolve a local JSON pointer such as ``#/components/schemas/User``."""
    node: Any = document
    for part in ref[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if isinstance(node, list):
            node = node[int(part)]
        elif isinstance(node, dict) and part in node:
            node = node[part]
        else:
            raise ValueError(f"unresolvable reference {ref!r}")
    return node


def dereference(document: Document) -> Document:
    """Return a copy of ``document`` with local ``$ref`` nodes inlined.

    Recursive references are left in place; remote references are untouched.
    """

    def resolve(node: Any, seen: frozenset[str]) -> Any:
        if isinstance(node, dict):
            ref = node.get("$ref")
            if isinstance(ref, str) and ref.startswith("#/"):
                if ref in seen:
                    return node
                return resolve(resolve_ref(document, ref), seen | {ref})
            return {key: resolve(value, seen) for key, value in node.items()}
        if isinstance(node, list):
            return [resolve(item, seen) for item in node]
        return node

    resolved: Document = resolve(document, frozenset())
    return resolved
