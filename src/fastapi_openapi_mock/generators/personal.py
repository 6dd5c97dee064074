"""Person generators — names, contact details, usernames."""

from __future__ import annotations

from fastapi_openapi_mock.context import SynthesisContext


def first_name(ctx: SynthesisContext) -> str:
    return ctx.faker.first_name()


def last_name(ctx: SynthesisContext) -> str:
    return ctx.faker.last_name()


def full_name(ctx: SynthesisContext) -> str:
    return f"{ctx.faker.first_name()} {ctx.faker.last_name()}"


def email(ctx: SynthesisContext) -> str:
    """``first.last@domain`` on a reserved example domain."""
    local = f"{ctx.faker.first_name()}.{ctx.faker.last_name()}".lower()
    return f"{local}@{ctx.faker.safe_domain_name()}"


def phone(ctx: SynthesisContext) -> str:
    area = ctx.rng.randint(200, 999)
    prefix = ctx.rng.randint(200, 999)
    line = ctx.rng.randint(1000, 9999)
    return f"+1 ({area}) {prefix}-{line}"


def username(ctx: SynthesisContext) -> str:
    return f"{ctx.faker.first_name().lower()}{ctx.rng.randint(1, 999)}"
