"""Financial domain models."""

from stub_collector.models.financial.account import (
    METADATA_IBAN,
    Account,
    LoyaltyCard,
    PaymentMethod,
)
from stub_collector.models.financial.enums import (
    AccountType,
    BarcodeType,
    PaymentType,
    ProductReferenceType,
    QuantityUnit,
    RecurrenceUnit,
    TransactionType,
)
from stub_collector.models.financial.recurring import DEFAULT_RATIO, RecurringPaymentConfig
from stub_collector.models.financial.transaction import Item, Payment, Transaction

__all__ = [
    "Account",
    "AccountType",
    "BarcodeType",
    "DEFAULT_RATIO",
    "Item",
    "LoyaltyCard",
    "METADATA_IBAN",
    "Payment",
    "PaymentMethod",
    "PaymentType",
    "ProductReferenceType",
    "QuantityUnit",
    "RecurrenceUnit",
    "RecurringPaymentConfig",
    "Transaction",
    "TransactionType",
]
