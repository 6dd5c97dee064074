"""String generators — formats, patterns, random tokens and property-name hints."""

from __future__ import annotations

import string
import uuid
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from fastapi_openapi_mock.context import SynthesisContext
from fastapi_openapi_mock.generators import (
    address,
    business,
    finance,
    images,
    personal,
)

BASE36 = string.digits + string.ascii_lowercase

# Applied in order; anything else in the pattern is kept verbatim
PATTERN_SUBSTITUTIONS = (
    ("[a-zA-Z]", "A"),
    ("[0-9]", "1"),
    ("[a-zA-Z0-9]", "X"),
)


def uuid4(ctx: SynthesisContext) -> str:
    return str(uuid.UUID(int=ctx.rng.getrandbits(128), version=4))


def date_string() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def date_time_string() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def random_token(ctx: SynthesisContext, length: int = 8) -> str:
    return "mock-" + "".join(ctx.rng.choice(BASE36) for _ in range(length))


def from_pattern(pattern: str) -> str:
    """Best-effort literal substitution; not a regex-to-string generator."""
    for fragment, replacement in PATTERN_SUBSTITUTIONS:
        pattern = pattern.replace(fragment, replacement)
    return pattern


def enum_value(ctx: SynthesisContext, values: Sequence[Any]) -> Any:
    return values[ctx.rng.randint(0, len(values) - 1)]


def by_format(ctx: SynthesisContext, fmt: str) -> str | None:
    if fmt == "date":
        return date_string()
    if fmt == "date-time":
        return date_time_string()
    if fmt == "email":
        return personal.email(ctx)
    if fmt in ("uri", "url"):
        return images.resource_url(ctx)
    if fmt == "uuid":
        return uuid4(ctx)
    return None


def by_property_name(ctx: SynthesisContext, property_name: str) -> str | None:
    """Realistic value for a recognised property name, or None."""
    name = property_name.lower()
    if not name:
        return None

    if "email" in name:
        return personal.email(ctx)
    if "phone" in name:
        return personal.phone(ctx)

    if "avatar" in name:
        return images.avatar_url(ctx)
    if any(word in name for word in ("image", "picture", "photo")):
        return images.image_url(ctx)
    if any(word in name for word in ("url", "link", "website")):
        return images.resource_url(ctx)

    if "name" in name and not any(
        word in name for word in ("user", "file", "company", "organization")
    ):
        if "first" in name:
            return personal.first_name(ctx)
        if "last" in name:
            return personal.last_name(ctx)
        return personal.full_name(ctx)
    if "user" in name and ("name" in name or name == "user"):
        return personal.username(ctx)

    if "address" in name or "street" in name:
        return address.street_address(ctx)
    if "city" in name:
        return address.city(ctx)
    if "state" in name or "province" in name:
        return address.state(ctx)
    if "zip" in name or "postal" in name:
        return address.zip_code(ctx)
    if "country" in name:
        return address.country(ctx)

    if "currency" in name:
        return finance.currency(ctx)
    if "company" in name or "organization" in name:
        return business.company(ctx)
    if any(word in name for word in ("title", "position", "job")):
        return business.job_title(ctx)
    if any(word in name for word in ("description", "bio", "about")):
        return business.description(ctx)

    return None
