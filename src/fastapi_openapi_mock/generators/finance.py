"""Finance generators — currency codes, prices, amounts."""

from __future__ import annotations

import math

from fastapi_openapi_mock.context import SynthesisContext

PRICE_ENDINGS = (0.0, 0.99, 0.95, 0.5, 0.49)


def currency(ctx: SynthesisContext) -> str:
    """ISO 4217 code."""
    return ctx.faker.currency_code()


def integer_between(ctx: SynthesisContext, minimum: float, maximum: float) -> int:
    """Uniform integer in ``[minimum, maximum]``, collapsing to ``minimum`` if empty."""
    low = math.ceil(minimum)
    high = math.floor(maximum)
    if high < low:
        return low
    return ctx.rng.randint(low, high)


def float_between(ctx: SynthesisContext, minimum: float, maximum: float) -> float:
    """Uniform float in ``[minimum, maximum]`` rounded to 2 decimals."""
    if maximum < minimum:
        return round(minimum, 2)
    return round(ctx.rng.uniform(minimum, maximum), 2)


def price(
    ctx: SynthesisContext,
    minimum: float = 1,
    maximum: float = 1000,
    *,
    integer: bool = False,
) -> float | int:
    """Whole part in ``[minimum, maximum)`` plus a realistic cents ending, clamped to ``maximum``.

    Integer schemas keep the whole part only.
    """
    if maximum <= minimum:
        base = math.floor(minimum)
    else:
        base = math.floor(ctx.rng.random() * (maximum - minimum) + minimum)
    if integer:
        return base
    value = round(base + ctx.rng.choice(PRICE_ENDINGS), 2)
    return maximum if value > maximum else value


def amount(
    ctx: SynthesisContext,
    minimum: float = 1,
    maximum: float = 100,
    *,
    integer: bool = False,
) -> float | int:
    """Either a whole number or a 2-decimal value, chosen uniformly."""
    if integer or ctx.rng.random() > 0.5:
        return integer_between(ctx, minimum, maximum)
    return float_between(ctx, minimum, maximum)
