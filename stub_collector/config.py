"""Configuration management for stub-collector."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from stub_collector.exceptions import ConfigurationError
from stub_collector.models.financial import Account, RecurringPaymentConfig

MAX_DELAY_SECONDS = 3600
DEFAULT_DELAY_SECONDS = 1


class CollectorMode(str, Enum):
    """What a collector session does.

    ``OPERATIONS`` generates data; every ``ERR_*`` mode makes one call
    fail on purpose so hosts can test their fault handling.
    """

    OPERATIONS = "OPERATIONS"
    ERR_COLLECT_ERROR = "ERR_COLLECT_ERROR"
    ERR_ACCESS_DENY = "ERR_ACCESS_DENY"
    ERR_TEMPORARY_UNAVAILABLE = "ERR_TEMPORARY_UNAVAILABLE"
    ERR_CONNECTION_FAILURE = "ERR_CONNECTION_FAILURE"
    ERR_PARAMETER_ERROR = "ERR_PARAMETER_ERROR"
    ERR_RUNTIME_COLLECT = "ERR_RUNTIME_COLLECT"
    ERR_RUNTIME_OPERATION = "ERR_RUNTIME_OPERATION"
    ERR_RUNTIME_ACCOUNT = "ERR_RUNTIME_ACCOUNT"
    ERR_RUNTIME_VALIDATE = "ERR_RUNTIME_VALIDATE"


@dataclass(frozen=True)
class FieldSpec:
    """Description of one host-editable configuration field.

    Parameters
    ----------
    name : str
        Attribute name on :class:`CollectorConfig`.
    kind : str
        Value kind understood by the host form builder
        (``enum``, ``int``, ``datetime``, ``str``, ``bool``, ``account``).
    order : int
        Display order within the fieldset.
    fieldset : str | None
        Fieldset the field belongs to (shown only for the matching mode).
    required : bool
        Whether the host must provide a value.
    """

    name: str
    kind: str
    order: int
    fieldset: str | None = None
    required: bool = True


_OPERATIONS = f"mode_{CollectorMode.OPERATIONS.value}"
_PARAMETER_ERROR = f"mode_{CollectorMode.ERR_PARAMETER_ERROR.value}"

FIELD_SCHEMA: tuple[FieldSpec, ...] = (
    FieldSpec("mode", "enum", 0),
    FieldSpec("account_payment", "account", 1, _OPERATIONS, required=False),
    FieldSpec("account_saving", "account", 1, _OPERATIONS, required=False),
    FieldSpec("account_shopping", "account", 1, _OPERATIONS, required=False),
    FieldSpec("correct_count", "int", 2, _OPERATIONS),
    FieldSpec("error_count", "int", 3, _OPERATIONS),
    FieldSpec("begin_date", "datetime", 4, _OPERATIONS),
    FieldSpec("end_date", "datetime", 5, _OPERATIONS),
    FieldSpec("delay_seconds", "int", 6, _OPERATIONS),
    FieldSpec("parameter_error_field", "str", 4, _PARAMETER_ERROR, required=False),
    FieldSpec("ask_for_code", "bool", 7, required=False),
)


@dataclass
class CollectorConfig:
    """Configuration of one collector session."""

    mode: CollectorMode = CollectorMode.OPERATIONS
    correct_count: int = 10
    error_count: int = 0
    begin_date: datetime | None = None
    end_date: datetime | None = None
    delay_seconds: int = DEFAULT_DELAY_SECONDS
    parameter_error_field: str | None = None
    ask_for_code: bool = False

    account_payment: Account | None = None
    account_saving: Account | None = None
    account_shopping: Account | None = None
    previous_accounts: list[Account] = field(default_factory=list)

    recurring_payments: list[RecurringPaymentConfig] = field(default_factory=list)

    seed: int | None = None
    locale: str = "fr_FR"

    @staticmethod
    def schema() -> list[FieldSpec]:
        """Return the host-editable fields, sorted by fieldset then order."""
        return sorted(FIELD_SCHEMA, key=lambda spec: (spec.fieldset or "", spec.order))


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class StubCollectorSettings:
    """Process-level settings for running a collector session."""

    collector: CollectorConfig = field(default_factory=CollectorConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "StubCollectorSettings":
        """Create settings from environment variables."""
        import os

        mode_name = os.getenv("STUB_MODE", CollectorMode.OPERATIONS.value)
        try:
            mode = CollectorMode(mode_name.upper())
        except ValueError:
            raise ConfigurationError(f"Unknown collector mode: {mode_name}") from None

        collector = CollectorConfig(
            mode=mode,
            correct_count=_int_env("STUB_CORRECT_COUNT", 10),
            error_count=_int_env("STUB_ERROR_COUNT", 0),
            delay_seconds=_int_env("STUB_DELAY_SECONDS", DEFAULT_DELAY_SECONDS),
            seed=int(os.getenv("STUB_SEED")) if os.getenv("STUB_SEED") else None,
            locale=os.getenv("STUB_LOCALE", "fr_FR"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            collector=collector,
            output=output,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Flatten the scalar settings (for logging)."""
        return {
            "mode": self.collector.mode.value,
            "correct_count": self.collector.correct_count,
            "error_count": self.collector.error_count,
            "delay_seconds": self.collector.delay_seconds,
            "seed": self.collector.seed,
            "locale": self.collector.locale,
            "output_dir": str(self.output.json_output_dir),
            "pretty_json": self.output.pretty_json,
            "log_level": self.log_level,
        }


def _int_env(name: str, default: int) -> int:
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
