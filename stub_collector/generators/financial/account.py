"""Default account generator for financial domain."""

from __future__ import annotations

import random
from decimal import Decimal

from stub_collector.generators.base import BaseGenerator
from stub_collector.generators.files import FileProvider, SampleFileProvider
from stub_collector.models.financial import (
    METADATA_IBAN,
    Account,
    AccountType,
    BarcodeType,
    LoyaltyCard,
    PaymentMethod,
    PaymentType,
)

COUNTERPARTY_ID = "12345678-1234-1234-1245-123456789012"


class AccountGenerator(BaseGenerator):
    """Generate the default accounts of a collector session.

    A session works on three accounts:
    - PAYMENT: checking account with a card, transfers and checks
    - SAVING: savings account fed by transfers and interest
    - SHOPPING: merchant account holding purchases, with a loyalty card
    """

    # Faker locale -> ISO 4217 currency
    LOCALE_CURRENCIES = {
        "fr_FR": "EUR",
        "fr_BE": "EUR",
        "de_DE": "EUR",
        "es_ES": "EUR",
        "it_IT": "EUR",
        "nl_NL": "EUR",
        "fr_CH": "CHF",
        "de_CH": "CHF",
        "en_GB": "GBP",
        "en_US": "USD",
        "en_CA": "CAD",
        "pt_BR": "BRL",
        "ja_JP": "JPY",
    }
    DEFAULT_CURRENCY = "EUR"

    SHOPPING_OPENING_BALANCE = Decimal("12.32")

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "fr_FR",
        rng: random.Random | None = None,
        files: FileProvider | None = None,
    ) -> None:
        super().__init__(seed, locale=locale, rng=rng)
        self.files = files or SampleFileProvider(self.rng)

    @property
    def currency(self) -> str:
        return self.LOCALE_CURRENCIES.get(self.locale, self.DEFAULT_CURRENCY)

    def payment_account(self) -> Account:
        account = self._new_account(AccountType.PAYMENT, "My checking account")
        account.add_payment_method(PaymentMethod(PaymentType.CARD, "1234"))
        account.add_payment_method(PaymentMethod(PaymentType.TRANSFER))
        account.add_payment_method(PaymentMethod(PaymentType.CHECK))
        account.metadata[METADATA_IBAN] = self.fake.iban()
        return account

    def saving_account(self) -> Account:
        account = self._new_account(AccountType.SAVING, "My saving account")
        account.add_payment_method(PaymentMethod(PaymentType.TRANSFER))
        return account

    def shopping_account(self) -> Account:
        account = self._new_account(
            AccountType.SHOPPING,
            "My shopping account",
            balance=self.SHOPPING_OPENING_BALANCE,
        )
        account.add_loyalty_card(
            LoyaltyCard(
                barcode_type=BarcodeType.CODE_128,
                reference="123456789012",
                issuer="Myshop.com",
                cover=self.files.loyalty_card_cover(),
            )
        )
        return account

    def _new_account(
        self,
        account_type: AccountType,
        label: str,
        balance: Decimal = Decimal("0.00"),
    ) -> Account:
        return Account(
            account_id=self.sampler.uuid(),
            account_type=account_type,
            label=label,
            counterparty_id=COUNTERPARTY_ID,
            currency=self.currency,
            balance=balance,
        )
