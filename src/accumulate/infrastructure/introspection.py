"""Operation discovery on provider runtime types."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

from accumulate.domain.model.enums import OperationKind
from accumulate.domain.model.operation import Operation
from accumulate.domain.model.parameter import Parameter
from accumulate.domain.model.plan import CollectionPlan, ProviderPlan
from accumulate.infrastructure.guards import require_providers, require_target_type
from accumulate.infrastructure.return_types import resolve_return_types

if TYPE_CHECKING:
    from collections.abc import Callable

    from accumulate.domain.ports import Accumulate

logger = logging.getLogger(__name__)


class OperationInspector:
    """Finds collectible operations on provider runtime types.

    Stateless - no state between calls, safe to share.

    Order of operations is deterministic: the runtime type's MRO from most
    derived to least derived (object excluded), attribute definition order
    inside each class. A name is reported once, by the class that wins
    attribute lookup.
    """

    def operations(self, provider: object) -> tuple[Operation, ...]:
        """All public operations of the provider's runtime type.

        Operations without a usable declared return type are omitted.
        """
        return self.operations_of(type(provider))

    def operations_of(self, cls: type) -> tuple[Operation, ...]:
        """All public operations of cls."""
        seen: set[str] = set()
        found: list[Operation] = []

        for klass in cls.__mro__:
            if klass is object:
                continue
            for name, attr in vars(klass).items():
                # Subclass attribute shadows the base one, whatever it is
                if name in seen:
                    continue
                seen.add(name)
                if name.startswith("_"):
                    continue

                operation = self._describe_attribute(klass, name, attr)
                if operation is not None:
                    found.append(operation)

        return tuple(found)

    def matching(self, provider: object, target_type: type) -> tuple[Operation, ...]:
        """Operations whose declared return type is target_type or a subclass."""
        selected = tuple(
            op for op in self.operations(provider) if op.returns_subtype_of(target_type)
        )
        logger.debug(
            "%s: %d operation(s) return %s",
            type(provider).__qualname__,
            len(selected),
            target_type.__qualname__,
        )
        return selected

    def plan(self, target_type: type, *providers: Accumulate) -> CollectionPlan:
        """Dry run: operations a collection call would invoke. Invokes nothing.

        Raises:
            InvalidTargetTypeError: target_type is not usable as a class.
            InvalidProviderError: A provider is not Accumulate.
        """
        require_target_type(target_type)
        require_providers(providers)
        return CollectionPlan(
            target_type=target_type,
            providers=tuple(
                ProviderPlan(
                    provider=type(provider).__qualname__,
                    operations=self.matching(provider, target_type),
                )
                for provider in providers
            ),
        )

    def _describe_attribute(self, klass: type, name: str, attr: Any) -> Operation | None:
        """Describe a class attribute as an Operation, None if it is not one."""
        match attr:
            case staticmethod():
                func, kind = attr.__func__, OperationKind.STATIC
            case classmethod():
                func, kind = attr.__func__, OperationKind.CLASS
            case _ if inspect.isfunction(attr):
                func, kind = attr, OperationKind.INSTANCE
            case _:
                # property, nested class, plain value
                return None

        if not inspect.isfunction(func):
            return None

        return describe_callable(func, name=name, owner=klass.__qualname__, kind=kind)


def describe_callable(
    func: Callable[..., Any],
    *,
    name: str,
    owner: str,
    kind: OperationKind = OperationKind.STATIC,
) -> Operation | None:
    """Describe func as an Operation.

    Args:
        func: Function to describe. For INSTANCE and CLASS kinds the first
              parameter is the bound one and is not reported.
        name: Operation name.
        owner: Qualified name of the owner.
        kind: How func is bound.

    Returns:
        Operation, or None if func declares no usable return type or is a
        coroutine function (its call yields a coroutine, not a value).
    """
    if inspect.iscoroutinefunction(func):
        logger.debug("skip %s.%s: coroutine function", owner, name)
        return None

    return_types = resolve_return_types(func)
    if return_types is None:
        logger.debug("skip %s.%s: no usable return type", owner, name)
        return None

    return Operation(
        name=name,
        owner=owner,
        return_types=return_types,
        parameters=_parameters(func, skip_bound=kind is not OperationKind.STATIC),
        kind=kind,
    )


def _parameters(func: Callable[..., Any], *, skip_bound: bool) -> tuple[Parameter, ...]:
    """Signature of func as Parameter value objects."""
    try:
        params = list(inspect.signature(func).parameters.values())
    # Callables without introspectable signature
    except (TypeError, ValueError):
        return ()

    if skip_bound and params:
        params = params[1:]

    return tuple(
        Parameter(
            name=p.name,
            annotation=_format_annotation(p.annotation),
            has_default=p.default is not inspect.Parameter.empty,
            is_positional_only=p.kind is inspect.Parameter.POSITIONAL_ONLY,
            is_keyword_only=p.kind is inspect.Parameter.KEYWORD_ONLY,
            is_variadic=p.kind is inspect.Parameter.VAR_POSITIONAL,
            is_variadic_keyword=p.kind is inspect.Parameter.VAR_KEYWORD,
        )
        for p in params
    )


def _format_annotation(annotation: Any) -> str | None:
    if annotation is inspect.Parameter.empty:
        return None
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        return annotation.__qualname__
    return repr(annotation)
