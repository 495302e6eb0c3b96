"""Operation value object: a collectible method found on a provider."""

from dataclasses import dataclass

from accumulate.domain.model.enums import OperationKind
from accumulate.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class Operation:
    """Public operation of a provider type with a usable return type.

    Immutable value object with FAIL-FIRST validation.

    Attributes:
        name: Attribute name on the provider
        owner: Qualified name of the class defining the operation
        return_types: Declared return type; several entries for a union
        parameters: Parameters excluding self/cls
        kind: Instance, class or static method
    """

    name: str
    owner: str
    return_types: tuple[type, ...]
    parameters: tuple[Parameter, ...] = ()
    kind: OperationKind = OperationKind.INSTANCE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.owner:
            raise ValueError("owner must not be empty")
        if not self.return_types:
            raise ValueError("return_types must not be empty")
        for return_type in self.return_types:
            if not isinstance(return_type, type):
                raise TypeError(f"return type must be a class, got {return_type!r}")

    @property
    def qualified_name(self) -> str:
        """owner.name"""
        return f"{self.owner}.{self.name}"

    def returns_subtype_of(self, target_type: type) -> bool:
        """Covariant check: every declared return type is target_type or a subclass."""
        return all(issubclass(t, target_type) for t in self.return_types)

    @property
    def return_annotation(self) -> str:
        """Return type formatted for display."""
        return " | ".join(t.__qualname__ for t in self.return_types)

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.qualified_name}({params}) -> {self.return_annotation}"
