"""Contracts between a collector and its host."""

from enum import Enum
from typing import Protocol

from stub_collector.models import ValidationMessage
from stub_collector.models.financial import Account, Transaction

PATTERN_6_DIGIT = r"^\d{6}$"


class OTPChannel(str, Enum):
    SMS = "SMS"
    EMAIL = "EMAIL"
    APP = "APP"


class OTPProvider(Protocol):
    """Host callback asking the user for a one-time code."""

    def request_code(
        self,
        channel: OTPChannel,
        keyword: str,
        pattern: str,
        prompt: str,
    ) -> str | None:
        """Return the code typed by the user, or None/"" if none was given."""
        ...


class CollectorPlugin(Protocol):
    """What a host drives: validate, collect, then read the results."""

    def validate(self) -> list[ValidationMessage]: ...

    def collect(self) -> None: ...

    def get_accounts(self) -> list[Account]: ...

    def get_transactions(self) -> list[Transaction]: ...

    def get_progress(self) -> int: ...
