"""SynthesisContext — random source, fake-data provider and logger for value synthesis."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from faker import Faker


@dataclass
class SynthesisContext:
    """Explicit state threaded into the synthesizer and every generator.

    ``faker`` is seeded from ``rng``, so a seeded context yields reproducible
    output.
    """

    rng: random.Random = field(default_factory=random.Random)
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("fastapi_openapi_mock")
    )
    faker: Faker = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.faker = Faker()
        self.faker.seed_instance(self.rng.getrandbits(32))

    @classmethod
    def seeded(cls, seed: int) -> SynthesisContext:
        return cls(rng=random.Random(seed))

