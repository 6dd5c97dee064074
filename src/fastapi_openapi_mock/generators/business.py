"""Business generators — companies, job titles, descriptions."""

from __future__ import annotations

from fastapi_openapi_mock.context import SynthesisContext


def company(ctx: SynthesisContext) -> str:
    return ctx.faker.company()


def job_title(ctx: SynthesisContext) -> str:
    return ctx.faker.job()


def description(ctx: SynthesisContext) -> str:
    return ctx.faker.sentence(nb_words=8)
