"""Custom exception hierarchy for stub-collector."""

from datetime import datetime


class StubCollectorError(Exception):
    """Base exception for all stub-collector errors."""


class ConfigurationError(StubCollectorError):
    """Raised when configuration is invalid or missing."""


class InvalidCollectorStateError(StubCollectorError):
    """Raised when the collector is in an invalid state for the operation."""


class ReferentialIntegrityError(StubCollectorError):
    """Raised when a transaction references an unknown account."""


class CollectorFault(StubCollectorError):
    """Operational fault the host is expected to recover from.

    Parameters
    ----------
    message : str
        Message catalogue key (e.g. ``error.CollectError``).
    timestamp : datetime | None
        When the fault occurred (defaults to now).
    """

    def __init__(self, message: str, timestamp: datetime | None = None) -> None:
        super().__init__(message)
        self.timestamp = timestamp or datetime.now()


class CollectError(CollectorFault):
    """Generic collection failure."""


class AccessDenied(CollectorFault):
    """Credentials or one-time code were refused."""


class TemporaryUnavailable(CollectorFault):
    """The remote side is temporarily unavailable."""


class ConnectionFailure(CollectorFault):
    """The remote side could not be reached."""


class ParameterError(CollectorFault):
    """A configuration field was rejected by the remote side."""

    def __init__(
        self,
        field: str | None,
        message: str,
        timestamp: datetime | None = None,
    ) -> None:
        super().__init__(message, timestamp)
        self.field = field


class SimulatedDefect(RuntimeError):
    """Unrecoverable fault raised on purpose to exercise host crash handling.

    The message always contains ``Simulated`` so hosts can tell it apart
    from a genuine defect.
    """

    MARKER = "Simulated"

    def __init__(self, where: str) -> None:
        super().__init__(f"{self.MARKER} runtime exception in {where}")
        self.where = where
