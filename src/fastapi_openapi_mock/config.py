"""MockServerConfig — server settings with environment defaults."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_PREFIX = "OPENAPI_MOCK_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class MockServerConfig:
    """Immutable server settings."""

    spec_path: str = "./openapi.yaml"
    host: str = "127.0.0.1"
    port: int = 3000
    seed: int | None = None
    log_level: str = "INFO"
    docs_path: str = "/api-docs"

    def __post_init__(self) -> None:
        if not 1 <= self.port <= 65535:
            raise ValueError("Port must be a valid number between 1 and 65535")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of {', '.join(LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MockServerConfig:
        env = os.environ if environ is None else environ
        seed = env.get(f"{ENV_PREFIX}SEED")
        try:
            port = int(env.get(f"{ENV_PREFIX}PORT", "3000"))
        except ValueError:
            raise ValueError(
                "Port must be a valid number between 1 and 65535"
            ) from None
        return cls(
            spec_path=env.get(f"{ENV_PREFIX}SPEC_PATH", cls.spec_path),
            host=env.get(f"{ENV_PREFIX}HOST", cls.host),
            port=port,
            seed=int(seed) if seed else None,
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", cls.log_level).upper(),
        )
