"""Collector sessions generating complete account and transaction sets."""

from stub_collector.scenarios.collector import CollectorState, StubbedCollector

__all__ = ["CollectorState", "StubbedCollector"]
