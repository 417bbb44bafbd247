"""Tests for sinks."""

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest

from stub_collector.models.financial import Account, AccountType, Transaction, TransactionType
from stub_collector.sinks import JsonFileSink


@pytest.fixture
def account() -> Account:
    return Account(
        account_id="acc-1",
        account_type=AccountType.SAVING,
        label="My saving account",
        counterparty_id="cp",
        currency="EUR",
        balance=Decimal("42.00"),
    )


@pytest.fixture
def transaction() -> Transaction:
    when = datetime(2024, 3, 5, 14, 30)
    return Transaction(
        transaction_id="tx-1",
        account_id="acc-1",
        transaction_type=TransactionType.INTERNAL,
        value_date=when,
        transaction_date=when,
        label="Interest 2%",
        details="Lorem ipsum dolor sit amet.",
        amount=Decimal("42.00"),
        currency="EUR",
    )


class TestJsonFileSink:
    """Tests for JsonFileSink."""

    def test_creates_output_dir(self, tmp_path: Path) -> None:
        output_dir = tmp_path / "nested" / "out"
        JsonFileSink(output_dir)
        assert output_dir.is_dir()

    def test_write_batch(self, tmp_path: Path, account: Account) -> None:
        sink = JsonFileSink(tmp_path)

        path = sink.write_batch("accounts", [account])

        assert path == tmp_path / "accounts.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == [
            {
                "account_id": "acc-1",
                "account_type": "SAVING",
                "label": "My saving account",
                "counterparty_id": "cp",
                "currency": "EUR",
                "balance": "42.00",
                "payment_methods": [],
                "loyalty_cards": [],
                "metadata": {},
            }
        ]

    def test_pretty(self, tmp_path: Path, transaction: Transaction) -> None:
        path = JsonFileSink(tmp_path, pretty=True).write_batch("transactions", [transaction])

        text = path.read_text(encoding="utf-8")
        assert text.startswith("[\n")
        assert json.loads(text)[0]["label"] == "Interest 2%"

    def test_non_ascii_kept(self, tmp_path: Path, transaction: Transaction) -> None:
        transaction.label = "Prélèvement EDF"
        path = JsonFileSink(tmp_path).write_batch("transactions", [transaction])
        assert "Prélèvement" in path.read_text(encoding="utf-8")

    def test_empty_batch(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path)
        path = sink.write_batch("transactions", [])

        assert json.loads(path.read_text(encoding="utf-8")) == []
        assert sink.counts == {"transactions": 0}

    def test_counts(self, tmp_path: Path, account: Account, transaction: Transaction) -> None:
        sink = JsonFileSink(tmp_path)
        sink.write_batch("accounts", [account])
        sink.write_batch("transactions", [transaction, transaction])

        assert sink.counts == {"accounts": 1, "transactions": 2}

    def test_close_logs_summary(
        self,
        tmp_path: Path,
        account: Account,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        sink = JsonFileSink(tmp_path)
        sink.write_batch("accounts", [account])

        with caplog.at_level(logging.INFO, logger="stub_collector.sinks.json_file"):
            sink.close()

        assert "accounts: 1 records" in caplog.text
