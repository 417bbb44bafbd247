"""Deliberate malformation of transactions for negative-path testing."""

from __future__ import annotations

import logging
import random
import sys
from decimal import Decimal
from enum import Enum

from stub_collector.models.financial import Transaction

logger = logging.getLogger(__name__)

# Scaled down from the largest float so that adding it to a balance stays finite
HUGE_AMOUNT = Decimal(sys.float_info.max) / 1000

UNKNOWN_ACCOUNT_ID = "foo"


class Corruption(str, Enum):
    NO_TRANSACTION_DATE = "NO_TRANSACTION_DATE"
    NO_VALUE_DATE = "NO_VALUE_DATE"
    NO_LABEL = "NO_LABEL"
    EMPTY_LABEL = "EMPTY_LABEL"
    BLANK_LABEL = "BLANK_LABEL"
    HUGE_AMOUNT = "HUGE_AMOUNT"
    HUGE_NEGATIVE_AMOUNT = "HUGE_NEGATIVE_AMOUNT"
    UNKNOWN_ACCOUNT = "UNKNOWN_ACCOUNT"
    ZERO_AMOUNT = "ZERO_AMOUNT"


class CorruptionInjector:
    """Apply exactly one malformation to a well-formed transaction.

    Each mode touches a single field:

    ======================== ==========================================
    NO_TRANSACTION_DATE      ``transaction_date = None``
    NO_VALUE_DATE            ``value_date = None``
    NO_LABEL                 ``label = None``
    EMPTY_LABEL              ``label = ""``
    BLANK_LABEL              ``label = " "``
    HUGE_AMOUNT              ``amount = HUGE_AMOUNT``
    HUGE_NEGATIVE_AMOUNT     ``amount = -HUGE_AMOUNT``
    UNKNOWN_ACCOUNT          ``account_id = "foo"``
    ZERO_AMOUNT              ``amount = 0``
    ======================== ==========================================
    """

    MODES = list(Corruption)

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def inject(self, transaction: Transaction) -> Corruption:
        """Corrupt ``transaction`` in place with a uniformly chosen mode."""
        mode = self.rng.choice(self.MODES)
        self.apply(transaction, mode)
        return mode

    def apply(self, transaction: Transaction, mode: Corruption) -> Transaction:
        """Corrupt ``transaction`` in place with ``mode``."""
        if mode == Corruption.NO_TRANSACTION_DATE:
            transaction.transaction_date = None
        elif mode == Corruption.NO_VALUE_DATE:
            transaction.value_date = None
        elif mode == Corruption.NO_LABEL:
            transaction.label = None
        elif mode == Corruption.EMPTY_LABEL:
            transaction.label = ""
        elif mode == Corruption.BLANK_LABEL:
            transaction.label = " "
        elif mode == Corruption.HUGE_AMOUNT:
            transaction.amount = HUGE_AMOUNT
        elif mode == Corruption.HUGE_NEGATIVE_AMOUNT:
            transaction.amount = -HUGE_AMOUNT
        elif mode == Corruption.UNKNOWN_ACCOUNT:
            transaction.account_id = UNKNOWN_ACCOUNT_ID
        else:  # ZERO_AMOUNT
            transaction.amount = Decimal("0.00")

        logger.debug(
            "Corrupted transaction %s: %s",
            transaction.transaction_id,
            mode.value,
            extra={"corruption": mode.value},
        )
        return transaction
