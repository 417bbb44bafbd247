"""Tests for data generators."""

import random
import re
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from stub_collector.generators.files import SampleFileProvider
from stub_collector.generators.financial import AccountGenerator, TransactionGenerator
from stub_collector.generators.financial.account import COUNTERPARTY_ID
from stub_collector.generators.labels import LabelGenerator
from stub_collector.generators.sampling import MAX_PRICE, MIN_PRICE, RandomSampler, to_money
from stub_collector.models import FileType
from stub_collector.models.financial import (
    METADATA_IBAN,
    AccountType,
    BarcodeType,
    PaymentType,
    TransactionType,
)

LABEL_PATTERN = re.compile(r"^.+ .+ .+ \([A-Z0-9]{10}\)$")


def _utc_millis(millis: int) -> datetime:
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


class TestRandomSampler:
    """Tests for RandomSampler."""

    def test_yes_bounds(self, rng: random.Random) -> None:
        sampler = RandomSampler(rng)
        assert not any(sampler.yes(0) for _ in range(200))
        assert all(sampler.yes(100) for _ in range(200))

    def test_price_range(self, rng: random.Random) -> None:
        sampler = RandomSampler(rng)
        for _ in range(500):
            price = sampler.price()
            assert MIN_PRICE <= price <= MAX_PRICE
            assert price == price.quantize(Decimal("0.01"))

    def test_amount_between_negative_range(self, rng: random.Random) -> None:
        sampler = RandomSampler(rng)
        for _ in range(200):
            assert Decimal("-10") <= sampler.amount_between(-10, -1) <= Decimal("-1")

    def test_quantity_values(self, rng: random.Random) -> None:
        sampler = RandomSampler(rng)
        values = {sampler.quantity() for _ in range(500)}
        assert values <= {1, 2, 3}
        assert 1 in values

    def test_item_count_range(self, rng: random.Random) -> None:
        sampler = RandomSampler(rng)
        counts = [sampler.item_count() for _ in range(1000)]
        assert min(counts) >= 1
        assert max(counts) <= 59
        # Single-item purchases dominate
        assert counts.count(1) > len(counts) / 2

    def test_item_count_single_share(self, seed: int) -> None:
        sampler = RandomSampler(random.Random(seed))
        counts = [sampler.item_count() for _ in range(10_000)]

        assert 0.67 <= counts.count(1) / len(counts) <= 0.73
        replay = RandomSampler(random.Random(seed))
        assert [replay.item_count() for _ in range(50)] == counts[:50]

    def test_instant_between(self, rng: random.Random, window_start, window_end) -> None:
        sampler = RandomSampler(rng)
        for _ in range(100):
            assert window_start <= sampler.instant_between(window_start, window_end) <= window_end

    def test_uuid_reproducible(self, seed: int) -> None:
        first = RandomSampler(random.Random(seed))
        second = RandomSampler(random.Random(seed))
        ids = [first.uuid() for _ in range(5)]

        assert ids == [second.uuid() for _ in range(5)]
        assert len(set(ids)) == 5
        assert all(len(value) == 36 for value in ids)

    def test_to_money(self) -> None:
        assert to_money(Decimal("3.14159")) == Decimal("3.14")
        assert str(to_money(2)) == "2.00"


class TestLabelGenerator:
    """Tests for LabelGenerator."""

    def test_operation_label_shape(self, seed: int) -> None:
        gen = LabelGenerator(seed=seed)
        for _ in range(20):
            label = gen.operation_label()
            assert LABEL_PATTERN.match(label), label
            assert any(label.startswith(kind) for kind in LabelGenerator.OPERATION_KINDS)

    def test_operation_details_shape(self, seed: int) -> None:
        gen = LabelGenerator(seed=seed)
        details = gen.operation_details(15)

        assert details.endswith(".")
        assert details[0].isupper()
        assert len(details.split()) == 15

    def test_operation_details_empty(self, seed: int) -> None:
        assert LabelGenerator(seed=seed).operation_details(0) == ""

    def test_product_name(self, seed: int) -> None:
        assert LabelGenerator(seed=seed).product_name() in LabelGenerator.PRODUCTS

    def test_same_seed_same_labels(self, seed: int) -> None:
        first = LabelGenerator(seed=seed)
        second = LabelGenerator(seed=seed)
        assert [first.operation_label() for _ in range(5)] == [
            second.operation_label() for _ in range(5)
        ]


class TestSampleFileProvider:
    """Tests for SampleFileProvider."""

    def test_image(self, rng: random.Random) -> None:
        image = SampleFileProvider(rng).image()

        assert image.file_type == FileType.IMAGE
        assert image.handle.startswith("samples/")
        assert image.mime_type.startswith("image/")

    def test_invoice(self) -> None:
        invoice = SampleFileProvider().invoice()

        assert invoice.file_type == FileType.INVOICE
        assert invoice.mime_type == "application/pdf"
        assert invoice.handle == "samples/invoice.pdf"

    def test_loyalty_card_cover(self) -> None:
        cover = SampleFileProvider().loyalty_card_cover()
        assert cover.handle == "samples/loyalty-card.png"


class TestAccountGenerator:
    """Tests for AccountGenerator."""

    def test_payment_account(self, seed: int) -> None:
        account = AccountGenerator(seed=seed).payment_account()

        assert account.account_type == AccountType.PAYMENT
        assert account.counterparty_id == COUNTERPARTY_ID
        assert account.currency == "EUR"
        assert account.balance == Decimal("0.00")
        assert account.metadata[METADATA_IBAN]
        assert [m.payment_type for m in account.payment_methods] == [
            PaymentType.CARD,
            PaymentType.TRANSFER,
            PaymentType.CHECK,
        ]

    def test_saving_account(self, seed: int) -> None:
        account = AccountGenerator(seed=seed).saving_account()

        assert account.account_type == AccountType.SAVING
        assert [m.payment_type for m in account.payment_methods] == [PaymentType.TRANSFER]

    def test_shopping_account(self, seed: int) -> None:
        account = AccountGenerator(seed=seed).shopping_account()

        assert account.account_type == AccountType.SHOPPING
        assert account.balance == Decimal("12.32")
        assert len(account.loyalty_cards) == 1
        card = account.loyalty_cards[0]
        assert card.barcode_type == BarcodeType.CODE_128
        assert card.issuer == "Myshop.com"
        assert card.cover is not None

    def test_unique_account_ids(self, seed: int) -> None:
        gen = AccountGenerator(seed=seed)
        ids = {gen.payment_account().account_id, gen.saving_account().account_id}
        assert len(ids) == 2

    @pytest.mark.parametrize(
        ("locale", "currency"),
        [("fr_FR", "EUR"), ("en_US", "USD"), ("en_GB", "GBP"), ("de_CH", "CHF")],
    )
    def test_currency_from_locale(self, locale: str, currency: str) -> None:
        account = AccountGenerator(seed=1, locale=locale).saving_account()
        assert account.currency == currency


class TestTransactionGenerator:
    """Tests for TransactionGenerator."""

    @pytest.fixture
    def accounts(self, seed: int):
        gen = AccountGenerator(seed=seed)
        return gen.payment_account(), gen.saving_account(), gen.shopping_account()

    def test_purchase_bundle(self, seed: int, accounts, window_start, window_end) -> None:
        payment, _, shopping = accounts
        shopping_before = shopping.balance
        gen = TransactionGenerator(seed=seed)

        purchase, debit = gen.purchase_bundle(shopping, payment, window_start, window_end)
        total = sum(item.price for item in purchase.items)

        assert purchase.transaction_type == TransactionType.PURCHASE
        assert purchase.account_id == shopping.account_id
        assert purchase.amount == -total
        assert purchase.label == ", ".join(item.label for item in purchase.items)
        assert purchase.details == purchase.label
        assert len(purchase.payments) == 1
        assert purchase.payments[0].payment_type == PaymentType.CARD
        assert purchase.payments[0].amount == total

        assert debit.transaction_type == TransactionType.PAYMENT
        assert debit.account_id == payment.account_id
        assert debit.amount == -total
        assert debit.label == f"Purchase of {purchase.label}"
        assert debit.value_date == purchase.value_date

        assert shopping.balance == shopping_before - total
        assert payment.balance == -total

    def test_transfer_bundle(self, seed: int, accounts, window_start, window_end) -> None:
        payment, saving, _ = accounts
        gen = TransactionGenerator(seed=seed)

        outgoing, incoming = gen.transfer_bundle(payment, saving, window_start, window_end)

        assert outgoing.label == "Transfer to My saving account"
        assert incoming.label == "Transfer from My checking account"
        assert outgoing.amount == -incoming.amount
        assert MIN_PRICE <= incoming.amount <= MAX_PRICE
        assert outgoing.transaction_date == incoming.transaction_date
        assert payment.balance == outgoing.amount
        assert saving.balance == incoming.amount

    def test_internal_bundle(self, seed: int, accounts, window_start, window_end) -> None:
        _, saving, _ = accounts
        gen = TransactionGenerator(seed=seed)

        bundle = gen.internal_bundle(saving, window_start, window_end)

        assert len(bundle) == 1
        interest = bundle[0]
        assert interest.transaction_type == TransactionType.INTERNAL
        assert interest.label == "Interest 2%"
        assert interest.amount > 0
        assert saving.balance == interest.amount

    def test_bundle_dates_in_window(self, seed: int, accounts, window_start, window_end) -> None:
        payment, saving, shopping = accounts
        gen = TransactionGenerator(seed=seed)
        legs = []
        for _ in range(20):
            legs += gen.purchase_bundle(shopping, payment, window_start, window_end)
            legs += gen.transfer_bundle(payment, saving, window_start, window_end)

        for leg in legs:
            assert window_start <= leg.value_date <= window_end
            assert window_start <= leg.transaction_date <= window_end
            assert leg.label.strip()

    def test_adhoc_not_posted(self, seed: int, accounts, window_start, window_end) -> None:
        payment, _, _ = accounts
        gen = TransactionGenerator(seed=seed)
        for _ in range(50):
            tx = gen.adhoc(payment, window_start, window_end)
            assert window_start <= tx.value_date <= tx.transaction_date <= window_end
            assert Decimal("-500") <= tx.amount <= Decimal("500")
            assert LABEL_PATTERN.match(tx.label)
        assert payment.balance == Decimal("0.00")

    def test_generate_item(self, seed: int) -> None:
        gen = TransactionGenerator(seed=seed)
        for _ in range(50):
            item = gen.generate_item()
            assert item.label in LabelGenerator.PRODUCTS
            assert MIN_PRICE <= item.price <= MAX_PRICE
            assert item.quantity in (1, 2, 3)
            assert item.url in (None, "https://tibu.com")

    @pytest.mark.parametrize(
        ("millis", "expected"),
        [
            (11_000, TransactionType.PURCHASE),
            (77_000, TransactionType.PURCHASE),
            (7_000, TransactionType.INTERNAL),
            (35_000, TransactionType.INTERNAL),
            (5_000, TransactionType.TRANSFER),
            (1_000, TransactionType.PAYMENT),
        ],
    )
    def test_type_for(self, millis: int, expected: TransactionType) -> None:
        assert TransactionGenerator.type_for(_utc_millis(millis)) == expected

    def test_same_seed_same_bundles(self, seed: int, window_start, window_end) -> None:
        def run() -> list:
            gen = AccountGenerator(seed=seed)
            payment, shopping = gen.payment_account(), gen.shopping_account()
            tx_gen = TransactionGenerator(seed=seed)
            return tx_gen.purchase_bundle(shopping, payment, window_start, window_end)

        assert run() == run()
