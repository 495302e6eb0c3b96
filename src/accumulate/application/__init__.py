"""accumulate application layer: collection entry points and reporting."""

from accumulate.application.accumulators import Accumulators
from accumulate.application.registry import ProducerRegistry
from accumulate.application.reporters import ConsoleConfig, ConsoleReporter

__all__ = [
    "Accumulators",
    "ConsoleConfig",
    "ConsoleReporter",
    "ProducerRegistry",
]
