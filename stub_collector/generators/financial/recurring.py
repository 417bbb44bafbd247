"""Recurring payment generator for financial domain."""

from __future__ import annotations

import calendar
import logging
import random
import uuid
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal
from typing import Iterator

from stub_collector.generators.base import BaseGenerator
from stub_collector.generators.sampling import CENT
from stub_collector.generators.financial.transaction import post
from stub_collector.models.financial import (
    Account,
    RecurrenceUnit,
    RecurringPaymentConfig,
    Transaction,
    TransactionType,
)

logger = logging.getLogger(__name__)

# Namespace of the name-based occurrence ids
OCCURRENCE_NAMESPACE = uuid.UUID("6f1c1a52-3c0e-4b7e-9a55-0c5d2a3e8b41")


@dataclass(frozen=True)
class Occurrence:
    """One scheduled materialization of a recurring payment."""

    day: date
    amount: Decimal
    occurrence_id: str


def occurrence_id(seed: str, day: date) -> str:
    """Name-based id of the occurrence of series ``seed`` on ``day``."""
    return str(uuid.uuid3(OCCURRENCE_NAMESPACE, seed + day.isoformat()))


def add_months(start: date, months: int) -> date:
    """``start`` shifted by ``months``, clamped to the end of the target month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def step_date(start: date, unit: RecurrenceUnit, steps: int) -> date:
    """Date of the ``steps``-th step from ``start``.

    Month and year steps are always computed from ``start`` so a series
    starting on the 31st comes back to the 31st after a shorter month.
    """
    if unit == RecurrenceUnit.DAY:
        return start + timedelta(days=steps)
    elif unit == RecurrenceUnit.WEEK:
        return start + timedelta(weeks=steps)
    elif unit == RecurrenceUnit.MONTH:
        return add_months(start, steps)
    return add_months(start, 12 * steps)


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def _first_day(window_start: date | datetime) -> date:
    """First day whose midnight is not before ``window_start``."""
    day = _as_date(window_start)
    if isinstance(window_start, datetime) and window_start.time() != time.min:
        day += timedelta(days=1)
    return day


class RecurrenceEngine(BaseGenerator):
    """Enumerate and materialize the occurrences of recurring payments."""

    DETAILS_TEMPLATE = "Recurring payment {seed} of {day}"

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "fr_FR",
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(seed, locale=locale, rng=rng)

    def schedule(
        self,
        config: RecurringPaymentConfig,
        window_start: date | datetime,
        window_end: date | datetime,
    ) -> Iterator[date]:
        """Yield the step dates of ``config`` that survive window and month filters.

        Occurrences are stamped at midnight, so a window starting after
        midnight excludes its own first day.
        """
        first = max(config.start, _first_day(window_start))
        last = _as_date(window_end)
        if config.end is not None:
            last = min(last, config.end)

        steps = 0
        current = config.start
        while current <= last:
            if current >= first and config.in_month_range(current):
                yield current
            steps += config.interval
            current = step_date(config.start, config.unit, steps)

    def occurrences(
        self,
        config: RecurringPaymentConfig,
        window_start: date | datetime,
        window_end: date | datetime,
    ) -> list[Occurrence]:
        """Occurrences of ``config`` inside the window, in date order.

        Dates and ids depend only on the configuration and the window;
        amounts are drawn from the generator's random source.
        """
        return [
            Occurrence(day=day, amount=self.jitter(config), occurrence_id=occurrence_id(config.seed, day))
            for day in self.schedule(config, window_start, window_end)
        ]

    def jitter(self, config: RecurringPaymentConfig) -> Decimal:
        """Amount of one occurrence.

        Uniform in ``[amount * (1 - ratio), amount * (1 + ratio)]`` rounded
        to cents inside those bounds; a ratio of 0 returns the amount
        unchanged.
        """
        amount = Decimal(str(config.amount))
        ratio = config.effective_ratio
        if ratio == 0:
            return amount

        bound_a = amount * (1 - ratio)
        bound_b = amount * (1 + ratio)
        low = min(bound_a, bound_b).quantize(CENT, rounding=ROUND_CEILING)
        high = max(bound_a, bound_b).quantize(CENT, rounding=ROUND_FLOOR)
        if low >= high:
            return amount
        return self.sampler.amount_between(low, high)

    def generate(
        self,
        config: RecurringPaymentConfig,
        account: Account,
        window_start: date | datetime,
        window_end: date | datetime,
    ) -> list[Transaction]:
        """One PAYMENT transaction per occurrence, posted to ``account``."""
        transactions = []
        for occurrence in self.occurrences(config, window_start, window_end):
            when = datetime.combine(occurrence.day, time.min)
            transaction = Transaction(
                transaction_id=occurrence.occurrence_id,
                account_id=account.account_id,
                transaction_type=TransactionType.PAYMENT,
                value_date=when,
                transaction_date=when,
                label=config.label,
                details=self.DETAILS_TEMPLATE.format(seed=config.seed, day=occurrence.day.isoformat()),
                amount=occurrence.amount,
                currency=account.currency,
                recurring_id=config.seed,
            )
            transactions.append(post(account, transaction))

        logger.debug(
            "Recurring payment %s: %d occurrences between %s and %s",
            config.seed,
            len(transactions),
            window_start,
            window_end,
        )
        return transactions
