"""Financial domain generators."""

from stub_collector.generators.financial.account import AccountGenerator
from stub_collector.generators.financial.corruption import Corruption, CorruptionInjector
from stub_collector.generators.financial.recurring import Occurrence, RecurrenceEngine
from stub_collector.generators.financial.transaction import TransactionGenerator

__all__ = [
    "AccountGenerator",
    "Corruption",
    "CorruptionInjector",
    "Occurrence",
    "RecurrenceEngine",
    "TransactionGenerator",
]
