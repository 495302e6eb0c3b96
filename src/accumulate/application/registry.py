"""ProducerRegistry: explicit producers, validated at registration time."""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from accumulate.domain.exceptions import ArgumentMismatchError, ProducerRegistrationError
from accumulate.domain.model.arguments import NO_ARGS
from accumulate.infrastructure.guards import require_providers, require_target_type
from accumulate.infrastructure.introspection import OperationInspector, describe_callable
from accumulate.infrastructure.invocation import (
    bind_operation,
    call_with_arguments,
    check_arguments,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from accumulate.domain.model.arguments import Arguments
    from accumulate.domain.ports import Accumulate

logger = logging.getLogger(__name__)


T = TypeVar("T")


class ProducerRegistry(Generic[T]):
    """Registration table of producers returning T.

    Unlike Accumulators, producers are registered one by one and rejected
    immediately when their declared return type or signature does not fit.
    collect() can then only fail because a producer raised.

    Example:
        registry = ProducerRegistry(Metric, Arguments.of(window))

        @registry.register
        def cpu(window: int) -> Metric: ...

        registry.register_provider(disk_repository)
        metrics = registry.collect()
    """

    __slots__ = ("_arguments", "_inspector", "_producers", "_target_type")

    def __init__(self, target_type: type[T], arguments: Arguments = NO_ARGS) -> None:
        """Initialize empty registry.

        Args:
            target_type: Class every producer must return.
            arguments: Positional arguments passed to every producer.

        Raises:
            InvalidTargetTypeError: target_type is not usable as a class.
        """
        self._target_type = require_target_type(target_type)
        self._arguments = arguments
        self._inspector = OperationInspector()
        self._producers: list[tuple[str, Callable[..., T]]] = []

    @property
    def target_type(self) -> type[T]:
        """Class every producer must return."""
        return self._target_type

    @property
    def arguments(self) -> Arguments:
        """Positional arguments passed to every producer."""
        return self._arguments

    @property
    def producers(self) -> tuple[Callable[..., T], ...]:
        """Registered producers in registration order (snapshot)."""
        return tuple(producer for _, producer in self._producers)

    def register(self, producer: Callable[..., T]) -> Callable[..., T]:
        """Register producer. Usable as a decorator.

        Functions, bound methods and instances of classes defining an
        annotated __call__ are accepted. functools.partial objects and
        classes declare no return type of their own and are rejected.

        Raises:
            ProducerRegistrationError: producer is not callable, declares no
                return type compatible with the target, or cannot accept
                the registry's arguments.
        """
        name = _producer_name(producer)
        if not callable(producer):
            raise ProducerRegistrationError(name, f"not callable: {type(producer).__name__}")

        declared = _declaring_callable(producer)
        operation = describe_callable(declared, name=name, owner=_producer_owner(producer))
        if operation is None:
            raise ProducerRegistrationError(name, "no usable declared return type")
        if not operation.returns_subtype_of(self._target_type):
            raise ProducerRegistrationError(
                name,
                f"returns {operation.return_annotation}, "
                f"not a subtype of {self._target_type.__qualname__}",
            )

        self._check(name, declared)
        self._producers.append((name, producer))
        logger.debug("registered producer %s", name)
        return producer

    def register_provider(self, provider: Accumulate) -> int:
        """Register every operation of provider returning the target type.

        All operations are validated before any is registered.

        Returns:
            Number of producers registered.

        Raises:
            InvalidProviderError: provider is not Accumulate.
            ProducerRegistrationError: An operation cannot accept the arguments.
        """
        require_providers((provider,))
        operations = self._inspector.matching(provider, self._target_type)
        bound = [(op.qualified_name, bind_operation(provider, op)) for op in operations]
        for name, producer in bound:
            self._check(name, producer)
        self._producers.extend(bound)
        return len(bound)

    def collect(self) -> list[T]:
        """Invoke every producer in registration order.

        Returns:
            Fresh list of produced values.

        Raises:
            OperationInvocationError: A producer raised. Aborts the whole call.
        """
        values = [
            cast("T", call_with_arguments(producer, self._arguments, name))
            for name, producer in self._producers
        ]
        logger.debug("registry produced %d value(s)", len(values))
        return values

    def __len__(self) -> int:
        return len(self._producers)

    def _check(self, name: str, producer: Callable[..., Any]) -> None:
        try:
            check_arguments(producer, self._arguments, name)
        except ArgumentMismatchError as exc:
            raise ProducerRegistrationError(name, exc.reason) from exc


def _declaring_callable(producer: Callable[..., Any]) -> Callable[..., Any]:
    """Callable whose annotations describe producer.

    Instances resolve through their bound __call__.
    """
    if _is_callable_instance(producer):
        return cast("Callable[..., Any]", producer.__call__)
    return producer


def _is_callable_instance(producer: Any) -> bool:
    return callable(producer) and not (
        inspect.isroutine(producer)
        or inspect.isclass(producer)
        or isinstance(producer, functools.partial)
    )


def _producer_name(producer: Any) -> str:
    if _is_callable_instance(producer):
        return f"{type(producer).__qualname__}()"
    return getattr(producer, "__qualname__", None) or repr(producer)


def _producer_owner(producer: Any) -> str:
    return getattr(producer, "__module__", None) or "<unknown>"
