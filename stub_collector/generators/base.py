"""Base generator class for all data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker

from stub_collector.generators.sampling import RandomSampler


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: the random source, a sampler over it
    and a Faker instance seeded from it, so a generator built from a
    given seed (or sharing a given ``rng``) is fully reproducible.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility. Ignored when ``rng`` is given.
    locale : str
        Faker locale (default ``fr_FR``).
    rng : random.Random | None
        Random source shared with other generators of the same session.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "fr_FR",
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.locale = locale
        self.sampler = RandomSampler(self.rng)
        self.fake = Faker(locale)
        self.fake.seed_instance(self.rng.getrandbits(32))
