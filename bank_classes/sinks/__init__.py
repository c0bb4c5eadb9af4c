"""Output sinks for rendering banking records."""

from bank_classes.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
