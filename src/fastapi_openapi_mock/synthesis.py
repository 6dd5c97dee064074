"""Value synthesis — schema fragment + property-name hint → plausible mock value."""

from __future__ import annotations

import json
from typing import Any

from fastapi_openapi_mock._types import Response, SchemaObject
from fastapi_openapi_mock.context import SynthesisContext
from fastapi_openapi_mock.generators import finance, strings

DEFAULT_ARRAY_LENGTH = 10
DEFAULT_MINIMUM = 0
DEFAULT_MAXIMUM = 1000

PRICE_HINTS = ("price", "cost", "rate")
AMOUNT_HINTS = ("amount", "quantity", "total")

# Set by the response itself from the rendered body
FRAMING_HEADERS = ("content-type", "content-length", "transfer-encoding")


class ValueSynthesizer:
    """Recursively converts schema fragments into concrete values.

    Pure apart from the random source held by the context: ``example`` always
    wins, then ``type`` decides the shape.
    """

    def __init__(self, ctx: SynthesisContext | None = None) -> None:
        self.ctx = ctx or SynthesisContext()

    def synthesize(self, schema: SchemaObject, property_name: str = "") -> Any:
        if "example" in schema:
            return schema["example"]

        schema_type = schema.get("type")
        if schema_type == "object":
            return self._object(schema)
        if schema_type == "array":
            return self._array(schema, property_name)
        if schema_type == "string":
            return self._string(schema, property_name)
        if schema_type in ("number", "integer"):
            return self._number(schema, property_name)
        if schema_type == "boolean":
            return self.ctx.rng.random() > 0.5
        self.ctx.logger.debug("No mock value for schema type %r", schema_type)
        return None

    def _object(self, schema: SchemaObject) -> dict[str, Any]:
        properties = schema.get("properties") or {}
        return {key: self.synthesize(prop, key) for key, prop in properties.items()}

    def _array(self, schema: SchemaObject, property_name: str) -> list[Any]:
        items = schema.get("items")
        if not items:
            return []
        count = schema.get("minItems", DEFAULT_ARRAY_LENGTH)
        return [self.synthesize(items, property_name) for _ in range(count)]

    def _string(self, schema: SchemaObject, property_name: str) -> Any:
        fmt = schema.get("format")
        if fmt:
            formatted = strings.by_format(self.ctx, fmt)
            if formatted is not None:
                return formatted

        by_name = strings.by_property_name(self.ctx, property_name)
        if by_name is not None:
            return by_name

        if schema.get("enum"):
            return strings.enum_value(self.ctx, schema["enum"])
        if schema.get("pattern"):
            return strings.from_pattern(schema["pattern"])
        return strings.random_token(self.ctx)

    def _number(self, schema: SchemaObject, property_name: str) -> float | int:
        minimum = schema.get("minimum", DEFAULT_MINIMUM)
        maximum = schema.get("maximum", DEFAULT_MAXIMUM)
        integer = schema.get("type") == "integer"
        name = property_name.lower()

        if any(hint in name for hint in PRICE_HINTS):
            return finance.price(self.ctx, minimum, maximum, integer=integer)
        if any(hint in name for hint in AMOUNT_HINTS):
            return finance.amount(self.ctx, minimum, maximum, integer=integer)
        if integer:
            return finance.integer_between(self.ctx, minimum, maximum)
        return finance.float_between(self.ctx, minimum, maximum)

    def response_body(self, response: Response) -> Any:
        """Synthesize the ``application/json`` body of a response, or ``{}``."""
        content = response.get("content") or {}
        media = content.get("application/json") or {}
        schema = media.get("schema")
        if not schema:
            return {}
        return self.synthesize(schema)

    def response_headers(self, response: Response) -> dict[str, str]:
        headers: dict[str, str] = {}
        for name, header in (response.get("headers") or {}).items():
            if "$ref" in header:
                self.ctx.logger.debug("Skipping unresolved header reference: %s", name)
                continue
            if name.lower() in FRAMING_HEADERS:
                self.ctx.logger.debug("Skipping framing header: %s", name)
                continue
            if header.get("schema"):
                headers[name] = header_value(self.synthesize(header["schema"], name))
            elif "example" in header:
                headers[name] = header_value(header["example"])
        return headers


def header_value(value: Any) -> str:
    """Coerce a synthesized value into a header string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    if value is None:
        return ""
    return str(value)


def synthesize(
    schema: SchemaObject,
    property_name: str = "",
    *,
    ctx: SynthesisContext | None = None,
) -> Any:
    """Convenience wrapper around :class:`ValueSynthesizer`."""
    return ValueSynthesizer(ctx).synthesize(schema, property_name)
