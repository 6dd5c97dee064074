"""Request-body shaping — echo caller-supplied fields back in the mock response."""

from __future__ import annotations

from typing import Any


def merge_request_body(template: Any, body: Any) -> Any:
    """Deep-merge ``body`` into ``template`` and return the result.

    Every key of ``body`` overwrites the template's key, recursing when both
    sides are mappings. A non-mapping on either side leaves the template
    untouched. Neither argument is mutated.
    """
    if not isinstance(template, dict) or not isinstance(body, dict):
        return template

    merged = dict(template)
    for key, value in body.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_request_body(current, value)
        else:
            merged[key] = value
    return merged
