"""Stubbed collector session: validation, generation and progress reporting."""

from __future__ import annotations

import logging
import random
import time
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable

from stub_collector.config import (
    DEFAULT_DELAY_SECONDS,
    MAX_DELAY_SECONDS,
    CollectorConfig,
    CollectorMode,
)
from stub_collector.exceptions import (
    AccessDenied,
    CollectError,
    CollectorFault,
    ConfigurationError,
    ConnectionFailure,
    InvalidCollectorStateError,
    ParameterError,
    SimulatedDefect,
    TemporaryUnavailable,
)
from stub_collector.generators.files import FileProvider, SampleFileProvider
from stub_collector.generators.financial import (
    AccountGenerator,
    CorruptionInjector,
    RecurrenceEngine,
    TransactionGenerator,
)
from stub_collector.generators.financial.transaction import post
from stub_collector.generators.labels import LabelGenerator
from stub_collector.models import MessageSeverity, ValidationMessage
from stub_collector.models.financial import Account, Transaction
from stub_collector.plugin import PATTERN_6_DIGIT, OTPChannel, OTPProvider
from stub_collector.store import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = timedelta(days=7)

OTP_KEYWORD = "the keyword"
OTP_PROMPT = "The stubbed collector need a code, please provide one"


class CollectorState(str, Enum):
    UNVALIDATED = "UNVALIDATED"
    VALIDATED = "VALIDATED"
    COLLECTING = "COLLECTING"
    DONE = "DONE"
    FAILED = "FAILED"


_COLLECT_FAULTS: dict[CollectorMode, tuple[type[CollectorFault], str]] = {
    CollectorMode.ERR_COLLECT_ERROR: (CollectError, "error.CollectError"),
    CollectorMode.ERR_ACCESS_DENY: (AccessDenied, "error.AccessDeny"),
    CollectorMode.ERR_TEMPORARY_UNAVAILABLE: (TemporaryUnavailable, "error.TemporaryUnavailable"),
    CollectorMode.ERR_CONNECTION_FAILURE: (ConnectionFailure, "error.ConnectionFailure"),
}


class StubbedCollector:
    """Collector that fabricates its accounts and transactions.

    In ``OPERATIONS`` mode a session produces, over the configured window:

    - one interest credit on the saving account
    - per correct unit, a purchase (shopping + payment legs) and a
      transfer (payment + saving legs)
    - the occurrences of every configured recurring payment, on the
      payment account
    - per error unit, one corrupted transaction on the payment account

    Every other mode makes one call fail on purpose.

    Parameters
    ----------
    config : CollectorConfig | None
        Session configuration. ``validate()`` fills in defaults on it.
    otp_provider : OTPProvider | None
        Host callback used when ``config.ask_for_code`` is set.
    files : FileProvider | None
        Attachment source (defaults to bundled sample handles).
    rng : random.Random | None
        Random source; defaults to one seeded with ``config.seed``.
    sleep : Callable[[float], None]
        Sleeper used by the delay loop.
    clock : Callable[[], datetime]
        Source of "now" for the default window.
    """

    def __init__(
        self,
        config: CollectorConfig | None = None,
        otp_provider: OTPProvider | None = None,
        files: FileProvider | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config = config or CollectorConfig()
        self.otp_provider = otp_provider
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.files = files or SampleFileProvider(self.rng)
        self._sleep = sleep
        self._clock = clock

        locale = self.config.locale
        labels = LabelGenerator(locale=locale, rng=self.rng)
        self._account_gen = AccountGenerator(locale=locale, rng=self.rng, files=self.files)
        self._transaction_gen = TransactionGenerator(
            locale=locale, rng=self.rng, labels=labels, files=self.files
        )
        self._recurrence = RecurrenceEngine(locale=locale, rng=self.rng)
        self._injector = CorruptionInjector(rng=self.rng)

        self.store = SessionStore()
        for account in self.config.previous_accounts:
            self.store.add_account(account)

        self.state = CollectorState.UNVALIDATED
        self._progress = 0.0

    # Host-facing API
    def validate(self) -> list[ValidationMessage]:
        """Check the configuration, filling in default accounts and window.

        Returns
        -------
        list[ValidationMessage]
            Findings; ERROR findings flag an invalid configuration but do
            not prevent ``collect()``.
        """
        if self.config.mode == CollectorMode.ERR_RUNTIME_VALIDATE:
            raise SimulatedDefect("validate()")

        messages: list[ValidationMessage] = []
        if self.config.mode == CollectorMode.OPERATIONS:
            self._provision_accounts()
            messages.extend(self._check_window())
            messages.extend(self._check_counts())
            messages.extend(self._check_delay())

        for message in messages:
            logger.warning(
                "Validation %s on %s: %s",
                message.severity.value,
                message.field,
                message.key,
            )

        if self.state == CollectorState.UNVALIDATED:
            self.state = CollectorState.VALIDATED
        return messages

    def collect(self) -> None:
        """Generate the session data, then block for the configured delay.

        Raises
        ------
        CollectorFault
            When the mode asks for an operational fault, or when no
            one-time code was given.
        SimulatedDefect
            In ``ERR_RUNTIME_COLLECT`` mode.
        InvalidCollectorStateError
            When called twice, or before ``validate()`` in ``OPERATIONS``
            mode.
        """
        if self.state in (CollectorState.COLLECTING, CollectorState.DONE, CollectorState.FAILED):
            raise InvalidCollectorStateError(f"Cannot collect from state {self.state.value}")
        if self.config.mode == CollectorMode.OPERATIONS and self.state == CollectorState.UNVALIDATED:
            raise InvalidCollectorStateError("validate() must be called before collect()")

        self._progress = 0.0
        self.state = CollectorState.COLLECTING
        try:
            self._check_access_code()
            self._raise_configured_fault()
            if self.config.mode == CollectorMode.OPERATIONS:
                self._generate()
            self._wait()
        except BaseException:
            self.state = CollectorState.FAILED
            raise

        self.state = CollectorState.DONE

    def get_accounts(self) -> list[Account]:
        if self.config.mode == CollectorMode.ERR_RUNTIME_ACCOUNT:
            raise SimulatedDefect("get_accounts()")
        return list(self.store.accounts.values())

    def get_transactions(self) -> list[Transaction]:
        if self.config.mode == CollectorMode.ERR_RUNTIME_OPERATION:
            raise SimulatedDefect("get_transactions()")
        return list(self.store.transactions)

    def get_progress(self) -> int:
        return int(self._progress)

    # Validation
    def _provision_accounts(self) -> None:
        """Create the missing default accounts, once."""
        if self.config.account_payment is None:
            self.config.account_payment = self._account_gen.payment_account()
        if self.config.account_saving is None:
            self.config.account_saving = self._account_gen.saving_account()
        if self.config.account_shopping is None:
            self.config.account_shopping = self._account_gen.shopping_account()

        for account in (
            self.config.account_payment,
            self.config.account_saving,
            self.config.account_shopping,
        ):
            if self.store.add_account(account):
                logger.debug("Registered %s account %s", account.account_type.value, account.account_id)

    def _check_window(self) -> list[ValidationMessage]:
        config = self.config
        if config.begin_date is None:
            config.end_date = config.end_date or self._clock()
            config.begin_date = config.end_date - DEFAULT_WINDOW
            return []

        messages = []
        if config.end_date is None:
            messages.append(_error("end_date", "form.error.endDate.null"))
        elif config.begin_date > config.end_date:
            messages.append(_error("begin_date", "form.error.beginAfterEndDate"))
        return messages

    def _check_counts(self) -> list[ValidationMessage]:
        messages = []
        if self.config.error_count < 0:
            messages.append(_error("error_count", "form.error.errorCount"))
        if self.config.correct_count < 0:
            messages.append(_error("correct_count", "form.error.correctCount"))
        return messages

    def _check_delay(self) -> list[ValidationMessage]:
        delay = self.config.delay_seconds
        if 0 <= delay <= MAX_DELAY_SECONDS:
            return []
        self.config.delay_seconds = DEFAULT_DELAY_SECONDS
        return [
            ValidationMessage(
                severity=MessageSeverity.WARNING,
                field="delay_seconds",
                key="form.warn.delaySeconds.ignored",
                args=(delay,),
            )
        ]

    # Collection
    def _check_access_code(self) -> None:
        if not self.config.ask_for_code or self.otp_provider is None:
            return
        code = self.otp_provider.request_code(OTPChannel.SMS, OTP_KEYWORD, PATTERN_6_DIGIT, OTP_PROMPT)
        if not code:
            raise AccessDenied("Access denied, no OTP code provided")

    def _raise_configured_fault(self) -> None:
        mode = self.config.mode
        if mode in _COLLECT_FAULTS:
            fault, key = _COLLECT_FAULTS[mode]
            raise fault(key, self._clock())
        if mode == CollectorMode.ERR_PARAMETER_ERROR:
            raise ParameterError(self.config.parameter_error_field, "error.ParameterError", self._clock())
        if mode == CollectorMode.ERR_RUNTIME_COLLECT:
            raise SimulatedDefect("collect()")

    def _generate(self) -> None:
        config = self.config
        start, end = config.begin_date, config.end_date
        if start is None or end is None:
            raise ConfigurationError("Date window is incomplete, fix the validation errors first")

        payment = config.account_payment
        saving = config.account_saving
        shopping = config.account_shopping
        if payment is None or saving is None or shopping is None:
            raise InvalidCollectorStateError("Accounts are not provisioned, call validate() first")

        logger.info(
            "Collecting %d correct and %d erroneous units between %s and %s",
            config.correct_count,
            config.error_count,
            start,
            end,
            extra={"mode": config.mode.value},
        )

        self.store.add_transactions(self._transaction_gen.internal_bundle(saving, start, end))

        for _ in range(config.correct_count):
            self.store.add_transactions(self._transaction_gen.purchase_bundle(shopping, payment, start, end))
            self.store.add_transactions(self._transaction_gen.transfer_bundle(payment, saving, start, end))

        for recurring in config.recurring_payments:
            self.store.add_transactions(self._recurrence.generate(recurring, payment, start, end))

        for _ in range(config.error_count):
            transaction = self._transaction_gen.adhoc(payment, start, end)
            self._injector.inject(transaction)
            # Booked on the payment account whatever the corruption did
            post(payment, transaction)
            self.store.add_transaction(transaction, strict=False)

        logger.info("Collected %s", self.store.summary())

    def _wait(self) -> None:
        """Advance progress once per second of configured delay."""
        delay = self.config.delay_seconds
        for i in range(delay):
            self._sleep(1)
            self._progress = (i + 1) * (100.0 / delay)
        self._progress = 100.0


def _error(field: str, key: str) -> ValidationMessage:
    return ValidationMessage(severity=MessageSeverity.ERROR, field=field, key=key)
