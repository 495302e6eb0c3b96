"""Collection plan: what a collection call would invoke."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from accumulate.domain.model.operation import Operation


@dataclass(frozen=True, slots=True)
class ProviderPlan:
    """Operations selected on one provider.

    Attributes:
        provider: Qualified name of the provider's runtime type
        operations: Selected operations in invocation order
    """

    provider: str
    operations: tuple[Operation, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.provider:
            raise ValueError("provider must not be empty")


@dataclass(frozen=True, slots=True)
class CollectionPlan:
    """Dry-run result for a target type over a sequence of providers.

    Attributes:
        target_type: Type being collected
        providers: One entry per provider, in supplied order
    """

    target_type: type
    providers: tuple[ProviderPlan, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.target_type, type):
            raise TypeError(f"target_type must be a class, got {self.target_type!r}")

    @property
    def total(self) -> int:
        """Number of values the collection call would produce."""
        return sum(len(p.operations) for p in self.providers)

    @property
    def operations(self) -> tuple[Operation, ...]:
        """All selected operations in invocation order."""
        return tuple(op for p in self.providers for op in p.operations)
