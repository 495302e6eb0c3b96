"""Reporters for collection plans."""

from accumulate.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
]
