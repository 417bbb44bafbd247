"""Bounded pseudo-random draws shared by every generator.

All draws go through one injected :class:`random.Random`, never through
the module-level ``random`` functions, so a session seeded with the same
value replays the same data::

    sampler = RandomSampler(random.Random(42))
    sampler.price()          # Decimal('320.01')
    sampler.item_count()     # 1 most of the time
"""

from __future__ import annotations

import random
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Sequence, TypeVar

T = TypeVar("T")

CENT = Decimal("0.01")

MIN_PRICE = Decimal("1")
MAX_PRICE = Decimal("500")


def to_money(value: float | Decimal) -> Decimal:
    """Round a float or Decimal to cents."""
    return Decimal(str(round(float(value), 2))).quantize(CENT)


class RandomSampler:
    """Bounded draws over an injected random source.

    Parameters
    ----------
    rng : random.Random
        Random source. Share one instance between generators to get a
        single reproducible stream for a whole session.
    """

    __slots__ = ("rng",)

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def yes(self, percent: int) -> bool:
        """Return True with ``percent``% probability."""
        return self.rng.randrange(100) < percent

    def price(self) -> Decimal:
        """Uniform price in [1, 500)."""
        return self.amount_between(MIN_PRICE, MAX_PRICE)

    def amount_between(self, low: float | Decimal, high: float | Decimal) -> Decimal:
        """Uniform amount in [low, high], rounded to cents and kept in range."""
        low_d = Decimal(str(low))
        high_d = Decimal(str(high))
        value = to_money(self.rng.uniform(float(low_d), float(high_d)))
        return min(max(value, low_d), high_d)

    def quantity(self) -> int:
        """Quantity of one item: 1 (70%), 2 (20%) or 3 (10%)."""
        draw = self.rng.randrange(10)
        if draw < 7:
            return 1
        elif draw < 9:
            return 2
        return 3

    def item_count(self) -> int:
        """Number of items in a purchase.

        70% exactly 1, 10% 2-6, 15% 5-14, 5% 10-59.
        """
        draw = self.rng.randrange(100)
        if draw < 70:
            return 1
        elif draw < 80:
            return 2 + self.rng.randrange(5)
        elif draw < 95:
            return 5 + self.rng.randrange(10)
        return 10 + self.rng.randrange(50)

    def instant_between(self, start: datetime, end: datetime) -> datetime:
        """Uniform instant in [start, end]."""
        return start + (end - start) * self.rng.random()

    def uuid(self) -> str:
        """Random UUID4 string drawn from the injected source."""
        return str(uuid.UUID(int=self.rng.getrandbits(128), version=4))

    def choice(self, values: Sequence[T]) -> T:
        return self.rng.choice(values)
