"""CLI entry point for fastapi-openapi-mock."""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path

import click
import uvicorn

from fastapi_openapi_mock.config import LOG_LEVELS, MockServerConfig
from fastapi_openapi_mock.dispatcher import create_app
from fastapi_openapi_mock.exceptions import ParseError
from fastapi_openapi_mock.loader import load_specs_from_path
from fastapi_openapi_mock.merge import merge_specs

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("fastapi_openapi_mock.cli")


def _build_config(**overrides: object) -> MockServerConfig:
    base = MockServerConfig.from_env()
    changes = {key: value for key, value in overrides.items() if value is not None}
    return dataclasses.replace(base, **changes)


@click.command()
@click.option(
    "-p",
    "--port",
    type=int,
    default=None,
    help="Port to run the mock server on (default: 3000).",
)
@click.option(
    "--path",
    "spec_path",
    default=None,
    help="OpenAPI file or folder containing YAML/JSON specs "
    "(default: ./openapi.yaml).",
)
@click.option("--host", default=None, help="Interface to bind (default: 127.0.0.1).")
@click.option("--seed", type=int, default=None, help="Seed for reproducible mock data.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: INFO).",
)
@click.version_option(package_name="fastapi-openapi-mock")
def main(
    port: int | None,
    spec_path: str | None,
    host: str | None,
    seed: int | None,
    log_level: str | None,
) -> None:
    """Mock REST endpoints from OpenAPI specifications."""
    try:
        config = _build_config(
            port=port,
            spec_path=spec_path,
            host=host,
            seed=seed,
            log_level=log_level.upper() if log_level else None,
        )
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    logging.basicConfig(level=getattr(logging, config.log_level), format=LOG_FORMAT)

    resolved = Path(config.spec_path).resolve()
    try:
        logger.info("Loading OpenAPI specs from: %s", resolved)
        specs = load_specs_from_path(resolved)
        logger.info("Loaded %d specification(s)", len(specs))
        document = merge_specs(specs)
    except ParseError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    app = create_app(document, config=config)
    logger.info("Mock server is running on http://%s:%d", config.host, config.port)
    logger.info(
        "API documentation available at http://%s:%d%s",
        config.host,
        config.port,
        config.docs_path,
    )
    uvicorn.run(
        app, host=config.host, port=config.port, log_level=config.log_level.lower()
    )
