"""URL generators — generic resources, images, avatars."""

from __future__ import annotations

from fastapi_openapi_mock.context import SynthesisContext


def resource_url(ctx: SynthesisContext) -> str:
    return f"https://example.com/resource/{ctx.rng.randint(1, 9999)}"


def image_url(ctx: SynthesisContext, width: int = 400, height: int = 400) -> str:
    image_id = ctx.rng.randint(1, 1000)
    return f"https://picsum.photos/id/{image_id}/{width}/{height}"


def avatar_url(ctx: SynthesisContext, size: int = 200) -> str:
    return f"https://i.pravatar.cc/{size}?u={ctx.rng.randint(1, 70)}"
