"""Domain ports: capabilities implemented outside the library."""

from accumulate.domain.ports.accumulate import Accumulate

__all__ = ["Accumulate"]
