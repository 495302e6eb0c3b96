"""Accumulators: collect return values of matching provider operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar, cast

from accumulate.infrastructure.guards import require_providers, require_target_type
from accumulate.infrastructure.introspection import OperationInspector
from accumulate.infrastructure.invocation import invoke_operation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from accumulate.domain.model.arguments import Arguments
    from accumulate.domain.ports import Accumulate

logger = logging.getLogger(__name__)

_INSPECTOR = OperationInspector()


T = TypeVar("T")


class Accumulators(Generic[T]):
    """Values of type T collected from Accumulate providers.

    Every public operation of each provider whose declared return type is T
    (or a subclass of T) is invoked with the same Arguments, and the return
    values are kept in encounter order: provider order, then operation order
    on each provider.

    Construction does all the work. Afterwards the object is a read-only
    holder; a failure during construction propagates and no instance is
    produced.

    Warning: all selected operations receive the same positional arguments.
    An operation with a different signature aborts the whole collection with
    ArgumentMismatchError.

    Example:
        args = Arguments.builder().add_argument(tenant).build()
        users = Accumulators.collect_multi(User, args, ldap_repo, db_repo)
        for user in users.get_collected_values():
            ...
    """

    __slots__ = ("_target_type", "_values")

    def __init__(
        self,
        target_type: type[T],
        arguments: Arguments,
        providers: Sequence[Accumulate],
    ) -> None:
        """Collect immediately. Prefer collect_single() / collect_multi().

        Args:
            target_type: Class of the values to collect.
            arguments: Positional arguments for every selected operation.
                       Use NO_ARGS for operations without parameters.
            providers: Accumulate providers, in collection order.

        Raises:
            InvalidTargetTypeError: target_type is not usable as a class.
            InvalidProviderError: A provider is not Accumulate.
            ArgumentMismatchError: arguments do not fit a selected operation.
            OperationInvocationError: A selected operation raised.
        """
        require_target_type(target_type)
        require_providers(providers)

        self._target_type = target_type
        self._values: tuple[T, ...] = tuple(
            cast("T", invoke_operation(provider, operation, arguments))
            for provider in providers
            for operation in _INSPECTOR.matching(provider, target_type)
        )
        logger.debug(
            "collected %d %s value(s) from %d provider(s)",
            len(self._values),
            target_type.__qualname__,
            len(providers),
        )

    @classmethod
    def collect_single(
        cls,
        target_type: type[T],
        arguments: Arguments,
        provider: Accumulate,
    ) -> Accumulators[T]:
        """Collect values of target_type from exactly one provider.

        Args:
            target_type: Class of the values to collect.
            arguments: Positional arguments for every selected operation.
            provider: Accumulate provider.

        Returns:
            Accumulators holding the collected values.
        """
        return cls(target_type, arguments, (provider,))

    @classmethod
    def collect_multi(
        cls,
        target_type: type[T],
        arguments: Arguments,
        provider: Accumulate,
        *providers: Accumulate,
    ) -> Accumulators[T]:
        """Collect values of target_type from one or more providers.

        Same result as collect_single() when given a single provider.

        Args:
            target_type: Class of the values to collect.
            arguments: Positional arguments for every selected operation.
            provider: First Accumulate provider.
            *providers: Further providers, in collection order.

        Returns:
            Accumulators holding the collected values.
        """
        return cls(target_type, arguments, (provider, *providers))

    @property
    def target_type(self) -> type[T]:
        """Class the values were collected for."""
        return self._target_type

    def get_collected_values(self) -> list[T]:
        """Collected values as a fresh list, safe for the caller to mutate."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Accumulators({self._target_type.__qualname__}, {len(self._values)} value(s))"
