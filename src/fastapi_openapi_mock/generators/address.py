"""Address generators."""

from __future__ import annotations

from fastapi_openapi_mock.context import SynthesisContext


def street_address(ctx: SynthesisContext) -> str:
    return ctx.faker.street_address()


def city(ctx: SynthesisContext) -> str:
    return ctx.faker.city()


def state(ctx: SynthesisContext) -> str:
    """Two-letter US state code."""
    return ctx.faker.state_abbr()


def zip_code(ctx: SynthesisContext) -> str:
    return str(ctx.rng.randint(10000, 99999))


def country(ctx: SynthesisContext) -> str:
    return ctx.faker.country()
