"""Transaction model for financial domain."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from stub_collector.models.base import FileRef
from stub_collector.models.financial.enums import (
    PaymentType,
    ProductReferenceType,
    QuantityUnit,
    TransactionType,
)


@dataclass
class Item:
    """Line item of a purchase."""

    label: str
    price: Decimal
    quantity: int
    unit: QuantityUnit = QuantityUnit.UNIT
    references: dict[ProductReferenceType, str] = field(default_factory=dict)
    url: str | None = None
    files: list[FileRef] = field(default_factory=list)


@dataclass
class Payment:
    """Payment-instrument leg settling a purchase."""

    payment_type: PaymentType
    provider: str
    date: datetime
    amount: Decimal
    currency: str
    reference: str | None = None


@dataclass
class Transaction:
    """Account transaction.

    ``value_date`` is the economic effective date, ``transaction_date`` the
    execution date. Either may be ``None`` (and ``label`` may be blank) only
    in deliberately corrupted records.
    """

    transaction_id: str
    account_id: str
    transaction_type: TransactionType
    value_date: datetime | None
    transaction_date: datetime | None
    label: str | None
    details: str
    amount: Decimal  # signed: debit negative, credit positive
    currency: str

    items: list[Item] = field(default_factory=list)
    payments: list[Payment] = field(default_factory=list)
    files: list[FileRef] = field(default_factory=list)

    # Series identity when produced by a recurring payment
    recurring_id: str | None = None
