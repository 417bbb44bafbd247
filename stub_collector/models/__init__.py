"""Domain models for synthetic data generation."""

from stub_collector.models.base import FileRef, FileType, MessageSeverity, ValidationMessage

__all__ = ["FileRef", "FileType", "MessageSeverity", "ValidationMessage"]
