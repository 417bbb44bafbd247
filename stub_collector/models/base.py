"""Base models shared across domains."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FileType(str, Enum):
    IMAGE = "IMAGE"
    INVOICE = "INVOICE"


class MessageSeverity(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class FileRef:
    """Attachment handed out by a file provider.

    ``handle`` is opaque to the generators: it is whatever the provider
    returned (a resource name, a temporary path, a blob key...).
    """

    file_type: FileType
    title: str
    mime_type: str
    handle: str


@dataclass
class ValidationMessage:
    """Field-scoped finding returned by ``validate()``.

    ``key`` is a message catalogue key (e.g. ``form.error.endDate.null``);
    rendering it is the host's business.
    """

    severity: MessageSeverity
    field: str
    key: str
    args: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def is_error(self) -> bool:
        return self.severity == MessageSeverity.ERROR
