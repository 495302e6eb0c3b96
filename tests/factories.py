"""Test factories: provider classes and value types.

Providers are defined at module level so their annotations resolve
through this module's globals.
"""

import functools
from dataclasses import dataclass
from typing import Any

from accumulate.domain.model.enums import OperationKind
from accumulate.domain.model.operation import Operation
from accumulate.domain.model.parameter import Parameter
from accumulate.domain.ports import Accumulate

# =============================================================================
# Value types
# =============================================================================


@dataclass(frozen=True)
class Animal:
    name: str


@dataclass(frozen=True)
class Cat(Animal):
    pass


@dataclass(frozen=True)
class Dog(Animal):
    pass


@dataclass(frozen=True)
class Plant:
    name: str


# =============================================================================
# Providers
# =============================================================================


class Zoo(Accumulate):
    """Zero-argument operations: two animals, one plant, noise."""

    def tiger(self) -> Animal:
        return Animal("tiger")

    def garden(self) -> Plant:
        return Plant("fern")

    def kitten(self) -> Cat:
        return Cat("tom")

    def count(self) -> int:
        return 2

    def feed(self) -> None:
        pass

    def untyped(self):  # noqa: ANN201
        return Animal("untyped")

    def _keeper(self) -> Animal:
        return Animal("private")

    @property
    def mascot(self) -> Animal:
        return Animal("mascot")


class Kennel(Accumulate):
    """Zero-argument operations of every binding kind."""

    def rex(self) -> Dog:
        return Dog("rex")

    @staticmethod
    def fido() -> Dog:
        return Dog("fido")

    @classmethod
    def lassie(cls) -> Dog:
        return Dog("lassie")


class Greenhouse(Accumulate):
    """No Animal operations at all."""

    def rose(self) -> Plant:
        return Plant("rose")


class Shelter(Accumulate):
    """Two-argument operations (name: str, age: int)."""

    def adopt_cat(self, name: str, age: int) -> Cat:
        return Cat(f"{name}:{age}")

    def adopt_dog(self, name: str, age: int) -> Dog:
        return Dog(f"{name}:{age}")


class MixedShelter(Accumulate):
    """One two-argument and one zero-argument operation."""

    def adopt(self, name: str, age: int) -> Cat:
        return Cat(f"{name}:{age}")

    def stray(self) -> Cat:
        return Cat("stray")


class BrokenZoo(Accumulate):
    """Operation failing during its own execution."""

    def escaped(self) -> Animal:
        raise LookupError("cage is empty")


class BaseFarm(Accumulate):
    def cow(self) -> Animal:
        return Animal("base-cow")

    def horse(self) -> Animal:
        return Animal("horse")


class Farm(BaseFarm):
    """Overrides cow, adds sheep."""

    def sheep(self) -> Animal:
        return Animal("sheep")

    def cow(self) -> Animal:
        return Animal("farm-cow")


class ShadowFarm(BaseFarm):
    """Shadows an inherited operation with a plain attribute."""

    horse = None


class UnionZoo(Accumulate):
    def either(self) -> Cat | Dog:
        return Cat("either")

    def maybe(self) -> Cat | None:
        return None

    def mixed(self) -> Cat | Plant:
        return Plant("mixed")


class GenericZoo(Accumulate):
    def herd(self) -> list[Animal]:
        return [Animal("a"), Animal("b")]

    def anything(self) -> Any:
        return Animal("any")


class AsyncZoo(Accumulate):
    async def later(self) -> Animal:
        return Animal("later")

    def now(self) -> Animal:
        return Animal("now")


class UnresolvableZoo(Accumulate):
    def ghost(self) -> "Missing":  # noqa: F821
        return Animal("ghost")

    def real(self) -> Animal:
        return Animal("real")


class VariadicShelter(Accumulate):
    def many(self, *names: str) -> Cat:
        return Cat("+".join(names))


class Counter(Accumulate):
    """Counts invocations: side effects repeat on every collection."""

    def __init__(self) -> None:
        self.calls = 0

    def tick(self) -> int:
        self.calls += 1
        return self.calls


class LegacyRepository:
    """Not a subclass of Accumulate; registered virtually in tests."""

    def legacy(self) -> Animal:
        return Animal("legacy")


class NotAProvider:
    def animal(self) -> Animal:
        return Animal("nope")


def _logged(func):  # noqa: ANN001, ANN202
    @functools.wraps(func)
    def wrapper(*args, **kwargs):  # noqa: ANN002, ANN003, ANN202
        return func(*args, **kwargs)

    return wrapper


class DecoratedZoo(Accumulate):
    @_logged
    def wrapped(self) -> Animal:
        return Animal("wrapped")


class ShadowedZoo(Accumulate):
    """Instance attribute with the same name as an operation."""

    def __init__(self) -> None:
        self.bear = lambda: Animal("impostor")  # type: ignore[method-assign]

    def bear(self) -> Animal:
        return Animal("bear")


class CatFactory:
    """Callable instance: annotations live on __call__."""

    def __call__(self, name: str) -> Cat:
        return Cat(f"factory-{name}")


# =============================================================================
# Domain object factories
# =============================================================================


def make_operation(
    name: str = "op",
    owner: str = "Owner",
    return_types: tuple[type, ...] = (Animal,),
    parameters: tuple[Parameter, ...] = (),
    kind: OperationKind = OperationKind.INSTANCE,
) -> Operation:
    """Create a valid Operation for tests."""
    return Operation(
        name=name,
        owner=owner,
        return_types=return_types,
        parameters=parameters,
        kind=kind,
    )


def names(values: list[Any]) -> list[str]:
    """Names of collected values, for order assertions."""
    return [value.name for value in values]
