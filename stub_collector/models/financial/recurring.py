"""Recurring payment configuration."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from stub_collector.exceptions import ConfigurationError
from stub_collector.models.financial.enums import RecurrenceUnit

DEFAULT_RATIO = Decimal("0.30")


@dataclass(frozen=True)
class RecurringPaymentConfig:
    """Recurring payment series (rent, subscription, salary...).

    ``seed`` identifies the series: occurrence ids are derived from it and
    the occurrence date only, so regenerating the same window yields the
    same ids. ``ratio`` is the jitter applied to ``amount`` (``None`` means
    :data:`DEFAULT_RATIO`, ``0`` means a fixed amount). ``start_month`` and
    ``end_month`` restrict occurrences to an inclusive month range
    (1-12, no wrap around the new year).
    """

    seed: str
    label: str
    amount: Decimal
    unit: RecurrenceUnit
    start: date
    interval: int = 1
    ratio: Decimal | None = None
    end: date | None = None
    start_month: int | None = None
    end_month: int | None = None

    def __post_init__(self) -> None:
        if not self.seed:
            raise ConfigurationError("Recurring payment needs a non-empty seed")
        if self.interval < 1:
            raise ConfigurationError(f"Recurring payment {self.seed}: interval must be >= 1, got {self.interval}")
        if self.ratio is not None and not (0 <= self.ratio < 1):
            raise ConfigurationError(f"Recurring payment {self.seed}: ratio must be in [0, 1), got {self.ratio}")
        if self.end is not None and self.end < self.start:
            raise ConfigurationError(f"Recurring payment {self.seed}: end {self.end} is before start {self.start}")
        if (self.start_month is None) != (self.end_month is None):
            raise ConfigurationError(f"Recurring payment {self.seed}: start_month and end_month go together")
        for month in (self.start_month, self.end_month):
            if month is not None and not 1 <= month <= 12:
                raise ConfigurationError(f"Recurring payment {self.seed}: invalid month {month}")

    @property
    def effective_ratio(self) -> Decimal:
        return DEFAULT_RATIO if self.ratio is None else Decimal(str(self.ratio))

    def in_month_range(self, day: date) -> bool:
        """Whether ``day`` falls within the configured month range."""
        if self.start_month is None or self.end_month is None:
            return True
        return self.start_month <= day.month <= self.end_month
