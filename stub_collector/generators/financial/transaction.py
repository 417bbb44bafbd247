"""Transaction generator for financial domain."""

from __future__ import annotations

import logging
import random
from datetime import datetime
from decimal import Decimal

from stub_collector.generators.base import BaseGenerator
from stub_collector.generators.files import FileProvider, SampleFileProvider
from stub_collector.generators.labels import LabelGenerator
from stub_collector.generators.sampling import MAX_PRICE, MIN_PRICE
from stub_collector.models.financial import (
    Account,
    Item,
    Payment,
    PaymentType,
    ProductReferenceType,
    QuantityUnit,
    Transaction,
    TransactionType,
)

logger = logging.getLogger(__name__)


def post(account: Account, transaction: Transaction) -> Transaction:
    """Reflect ``transaction.amount`` into ``account.balance``."""
    account.balance += transaction.amount
    return transaction


class TransactionGenerator(BaseGenerator):
    """Generate linked multi-leg transactions over a date window.

    Every bundle method returns its legs in production order and has
    already posted each leg's signed amount to the account it references.
    """

    DETAILS_WORDS = 15

    CARD_PROVIDER = "Visa"
    CARD_REFERENCE = "1234"
    PRODUCT_URL = "https://tibu.com"
    ASIN = "ABCDEFGHIJ"
    SKU = "ABC-1234-XY"
    INTEREST_LABEL = "Interest 2%"

    ADHOC_MIN_AMOUNT = Decimal("-500")
    ADHOC_MAX_AMOUNT = Decimal("500")

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "fr_FR",
        rng: random.Random | None = None,
        labels: LabelGenerator | None = None,
        files: FileProvider | None = None,
    ) -> None:
        super().__init__(seed, locale=locale, rng=rng)
        self.labels = labels or LabelGenerator(locale=locale, rng=self.rng)
        self.files = files or SampleFileProvider(self.rng)

    def purchase_bundle(
        self,
        shopping: Account,
        payment: Account,
        start: datetime,
        end: datetime,
    ) -> list[Transaction]:
        """Purchase on the shopping account and its debit on the payment account."""
        when = self.sampler.instant_between(start, end)

        items = [self.generate_item() for _ in range(self.sampler.item_count())]
        total = sum((item.price for item in items), Decimal("0.00"))
        label = ", ".join(item.label for item in items)
        logger.debug("Purchase of %d items, total %s", len(items), total)

        purchase = Transaction(
            transaction_id=self.sampler.uuid(),
            account_id=shopping.account_id,
            transaction_type=TransactionType.PURCHASE,
            value_date=when,
            transaction_date=when,
            label=label,
            details=label,
            amount=-total,
            currency=shopping.currency,
            items=items,
            payments=[
                Payment(
                    payment_type=PaymentType.CARD,
                    provider=self.CARD_PROVIDER,
                    date=when,
                    amount=total,
                    currency=shopping.currency,
                    reference=self.CARD_REFERENCE,
                )
            ],
        )
        if self.sampler.yes(60):
            purchase.files.append(self.files.invoice())

        debit = Transaction(
            transaction_id=self.sampler.uuid(),
            account_id=payment.account_id,
            transaction_type=TransactionType.PAYMENT,
            value_date=when,
            transaction_date=when,
            label=f"Purchase of {label}",
            details=self.labels.operation_details(self.DETAILS_WORDS),
            amount=-total,
            currency=payment.currency,
        )

        return [post(shopping, purchase), post(payment, debit)]

    def transfer_bundle(
        self,
        payment: Account,
        saving: Account,
        start: datetime,
        end: datetime,
    ) -> list[Transaction]:
        """Transfer from the payment account to the saving account."""
        when = self.sampler.instant_between(start, end)
        amount = self.sampler.amount_between(MIN_PRICE, MAX_PRICE)

        outgoing = Transaction(
            transaction_id=self.sampler.uuid(),
            account_id=payment.account_id,
            transaction_type=TransactionType.TRANSFER,
            value_date=when,
            transaction_date=when,
            label=f"Transfer to {saving.label}",
            details=self.labels.operation_details(self.DETAILS_WORDS),
            amount=-amount,
            currency=payment.currency,
        )
        incoming = Transaction(
            transaction_id=self.sampler.uuid(),
            account_id=saving.account_id,
            transaction_type=TransactionType.TRANSFER,
            value_date=when,
            transaction_date=when,
            label=f"Transfer from {payment.label}",
            details=self.labels.operation_details(self.DETAILS_WORDS),
            amount=amount,
            currency=saving.currency,
        )

        return [post(payment, outgoing), post(saving, incoming)]

    def internal_bundle(
        self,
        saving: Account,
        start: datetime,
        end: datetime,
    ) -> list[Transaction]:
        """Interest credited to the saving account."""
        when = self.sampler.instant_between(start, end)
        interest = Transaction(
            transaction_id=self.sampler.uuid(),
            account_id=saving.account_id,
            transaction_type=TransactionType.INTERNAL,
            value_date=when,
            transaction_date=when,
            label=self.INTEREST_LABEL,
            details=self.labels.operation_details(self.DETAILS_WORDS),
            amount=self.sampler.amount_between(MIN_PRICE, MAX_PRICE),
            currency=saving.currency,
        )
        return [post(saving, interest)]

    def adhoc(self, account: Account, start: datetime, end: datetime) -> Transaction:
        """Single stand-alone transaction, not posted to any balance.

        The value date is drawn in the window and the transaction date
        between the value date and the end of the window.
        """
        value_date = self.sampler.instant_between(start, end)
        transaction_date = self.sampler.instant_between(value_date, end)

        return Transaction(
            transaction_id=self.sampler.uuid(),
            account_id=account.account_id,
            transaction_type=self.type_for(transaction_date),
            value_date=value_date,
            transaction_date=transaction_date,
            label=self.labels.operation_label(),
            details=self.labels.operation_details(self.DETAILS_WORDS),
            amount=self.sampler.amount_between(self.ADHOC_MIN_AMOUNT, self.ADHOC_MAX_AMOUNT),
            currency=account.currency,
        )

    def generate_item(self) -> Item:
        """Purchase line item with optional references, URL and cover."""
        item = Item(
            label=self.labels.product_name(),
            price=self.sampler.price(),
            quantity=self.sampler.quantity(),
            unit=QuantityUnit.UNIT,
        )
        if self.sampler.yes(40):
            item.references[ProductReferenceType.ASIN] = self.ASIN
        if self.sampler.yes(70):
            item.references[ProductReferenceType.SKU] = self.SKU
        if self.sampler.yes(80):
            item.url = self.PRODUCT_URL
        if self.sampler.yes(50):
            item.files.append(self.files.image())
        return item

    @staticmethod
    def type_for(when: datetime) -> TransactionType:
        """Transaction type derived from the epoch milliseconds of ``when``."""
        millis = int(when.timestamp() * 1000)
        if millis % 11 == 0:
            return TransactionType.PURCHASE
        elif millis % 7 == 0:
            return TransactionType.INTERNAL
        elif millis % 5 == 0:
            return TransactionType.TRANSFER
        return TransactionType.PAYMENT
