"""Synthetic account and transaction generator for aggregation pipelines."""

from stub_collector.config import CollectorConfig, CollectorMode
from stub_collector.scenarios import CollectorState, StubbedCollector

__version__ = "0.1.0"

__all__ = ["CollectorConfig", "CollectorMode", "CollectorState", "StubbedCollector"]
