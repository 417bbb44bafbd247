"""Account model for financial domain."""

from dataclasses import dataclass, field
from decimal import Decimal

from stub_collector.models.base import FileRef
from stub_collector.models.financial.enums import AccountType, BarcodeType, PaymentType

METADATA_IBAN = "IBAN"


@dataclass
class PaymentMethod:
    """Payment instrument attached to an account (card, transfer, check)."""

    payment_type: PaymentType
    reference: str | None = None


@dataclass
class LoyaltyCard:
    """Loyalty card attached to a shopping account."""

    barcode_type: BarcodeType
    reference: str
    issuer: str
    cover: FileRef | None = None


@dataclass
class Account:
    """Account whose transactions are collected.

    Account types:
    - PAYMENT: checking account paying for purchases and transfers
    - SAVING: savings account receiving transfers and interest
    - SHOPPING: merchant-side account holding purchases with their items
    """

    account_id: str
    account_type: AccountType
    label: str
    counterparty_id: str
    currency: str  # ISO 4217
    balance: Decimal = Decimal("0.00")
    payment_methods: list[PaymentMethod] = field(default_factory=list)
    loyalty_cards: list[LoyaltyCard] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)

    def add_payment_method(self, method: PaymentMethod) -> None:
        self.payment_methods.append(method)

    def add_loyalty_card(self, card: LoyaltyCard) -> None:
        self.loyalty_cards.append(card)
