"""Output sinks for exporting generated data."""

from stub_collector.sinks.json_file import JsonFileSink

__all__ = ["JsonFileSink"]
