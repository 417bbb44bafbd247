#!/usr/bin/env python3
"""Generate account and transaction fixtures as JSON files.

Runs one stubbed collector session without delay and writes
``accounts.json`` and ``transactions.json`` to the output directory.

Usage::

    python scripts/generate_fixtures.py --correct 50 --errors 5 --seed 42
    python scripts/generate_fixtures.py --begin 2024-01-01 --end 2024-03-31 --recurring
"""

import argparse
import logging
import sys
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from stub_collector.config import StubCollectorSettings
from stub_collector.exceptions import StubCollectorError
from stub_collector.logging import setup_logging
from stub_collector.models.financial import RecurrenceUnit, RecurringPaymentConfig
from stub_collector.scenarios import StubbedCollector
from stub_collector.sinks import JsonFileSink

logger = logging.getLogger(__name__)


def sample_recurring_payments(start: date) -> list[RecurringPaymentConfig]:
    """A handful of typical household series starting at ``start``."""
    return [
        RecurringPaymentConfig(
            seed="rent",
            label="Loyer",
            amount=Decimal("-850.00"),
            ratio=Decimal("0"),
            unit=RecurrenceUnit.MONTH,
            start=start.replace(day=5),
        ),
        RecurringPaymentConfig(
            seed="electricity",
            label="Prélèvement EDF",
            amount=Decimal("-74.50"),
            unit=RecurrenceUnit.MONTH,
            start=start.replace(day=12),
            interval=2,
        ),
        RecurringPaymentConfig(
            seed="salary",
            label="Virement salaire",
            amount=Decimal("2450.00"),
            ratio=Decimal("0.05"),
            unit=RecurrenceUnit.MONTH,
            start=start.replace(day=28),
        ),
        RecurringPaymentConfig(
            seed="gym",
            label="Abonnement salle de sport",
            amount=Decimal("-29.99"),
            ratio=Decimal("0"),
            unit=RecurrenceUnit.WEEK,
            start=start,
            interval=4,
            start_month=1,
            end_month=10,
        ),
    ]


def parse_date(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO date: {value}") from None


def main() -> int:
    """Main entry point."""
    settings = StubCollectorSettings.from_env()

    parser = argparse.ArgumentParser(description="Generate account and transaction fixtures")
    parser.add_argument(
        "--correct",
        type=int,
        default=settings.collector.correct_count,
        help="Number of purchase + transfer units (default: %(default)s)",
    )
    parser.add_argument(
        "--errors",
        type=int,
        default=settings.collector.error_count,
        help="Number of corrupted transactions (default: %(default)s)",
    )
    parser.add_argument("--begin", type=parse_date, default=None, help="Window start (ISO date)")
    parser.add_argument("--end", type=parse_date, default=None, help="Window end (ISO date)")
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.collector.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--locale",
        type=str,
        default=settings.collector.locale,
        help="Faker locale, also selects the currency (default: %(default)s)",
    )
    parser.add_argument(
        "--recurring",
        action="store_true",
        help="Add sample recurring payments (rent, salary...)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.output.json_output_dir,
        help="Output directory (default: %(default)s)",
    )
    parser.add_argument("--pretty", action="store_true", default=settings.output.pretty_json)
    parser.add_argument("--log-level", type=str, default=settings.log_level)
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    args = parser.parse_args()

    setup_logging(args.log_level, "json" if args.json_logs else "standard")

    config = settings.collector
    config.correct_count = args.correct
    config.error_count = args.errors
    config.begin_date = args.begin
    config.end_date = args.end
    config.seed = args.seed
    config.locale = args.locale
    config.delay_seconds = 0

    collector = StubbedCollector(config)
    messages = collector.validate()
    errors = [m for m in messages if m.is_error]
    if errors:
        for message in errors:
            logger.error("Invalid %s: %s", message.field, message.key)
        return 2

    if args.recurring and config.begin_date is not None:
        config.recurring_payments = sample_recurring_payments(config.begin_date.date())

    try:
        collector.collect()
    except StubCollectorError as e:
        logger.error("Collection failed: %s", e)
        return 1

    sink = JsonFileSink(args.output, pretty=args.pretty)
    sink.write_batch("accounts", collector.get_accounts())
    sink.write_batch("transactions", collector.get_transactions())
    sink.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
