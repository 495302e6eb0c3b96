"""Ordered positional arguments passed to every collected operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class Arguments:
    """Immutable ordered argument values.

    All operations selected in one collection call receive the same values
    in the same order. Add values in the builder in the order the operations
    expect them positionally.

    Attributes:
        values: Argument values in positional order
    """

    values: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.values, tuple):
            raise TypeError(f"values must be a tuple, got {type(self.values).__name__}")

    @classmethod
    def of(cls, *values: Any) -> Arguments:
        """Build Arguments directly from positional values."""
        if not values:
            return NO_ARGS
        return cls(values)

    @classmethod
    def builder(cls) -> ArgumentsBuilder:
        """Start a new ArgumentsBuilder."""
        return ArgumentsBuilder()

    def to_positional_array(self) -> list[Any]:
        """Values as a fresh list, safe for the caller to mutate."""
        return list(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __repr__(self) -> str:
        inner = ", ".join(repr(v) for v in self.values)
        return f"Arguments({inner})"


class ArgumentsBuilder:
    """Mutable builder for Arguments.

    build() may be called any number of times; every call returns an
    independent snapshot of the values added so far.
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: list[Any] = []

    def add_argument(self, value: Any) -> Self:
        """Append value to the pending arguments.

        Returns:
            This builder, for chaining.
        """
        self._values.append(value)
        return self

    def build(self) -> Arguments:
        """Freeze the values added so far into Arguments."""
        if not self._values:
            return NO_ARGS
        return Arguments(tuple(self._values))


# Shared empty instance: invoke operations without arguments
NO_ARGS = Arguments()
