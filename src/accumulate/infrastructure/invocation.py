"""Invocation of selected operations with shared Arguments.

Failure classification:
  - arguments do not fit the signature  → ArgumentMismatchError
  - operation not accessible            → OperationInvocationError
  - operation raised during execution   → OperationInvocationError
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, get_origin

from accumulate.domain.exceptions import ArgumentMismatchError, OperationInvocationError
from accumulate.infrastructure.return_types import resolve_annotations

if TYPE_CHECKING:
    from collections.abc import Callable

    from accumulate.domain.model.arguments import Arguments
    from accumulate.domain.model.operation import Operation

logger = logging.getLogger(__name__)

# Implicit numeric promotions accepted by annotations (PEP 484 numeric tower)
_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


def invoke_operation(provider: object, operation: Operation, arguments: Arguments) -> Any:
    """Invoke operation on provider with arguments as positional values.

    Raises:
        ArgumentMismatchError: Arguments do not fit the operation signature.
        OperationInvocationError: Attribute lookup failed or the operation raised.
    """
    bound = bind_operation(provider, operation)
    return call_with_arguments(bound, arguments, operation.qualified_name)


def bind_operation(provider: object, operation: Operation) -> Callable[..., Any]:
    """Bind the operation found on the provider's runtime type to the provider.

    Looked up on the class, so an instance attribute of the same name never
    replaces the selected operation.

    Raises:
        OperationInvocationError: The class no longer has the attribute.
    """
    cls = type(provider)
    try:
        attr = inspect.getattr_static(cls, operation.name)
    except AttributeError as exc:
        raise OperationInvocationError(operation.qualified_name, exc) from exc
    # Plain values are not descriptors
    bind = getattr(type(attr), "__get__", None)
    return attr if bind is None else bind(attr, provider, cls)


def call_with_arguments(func: Callable[..., Any], arguments: Arguments, name: str) -> Any:
    """Check arguments against func's signature, then call it.

    Raises:
        ArgumentMismatchError: Arguments do not fit func's signature.
        OperationInvocationError: func raised.
    """
    check_arguments(func, arguments, name)

    logger.debug("invoke %s with %d argument(s)", name, len(arguments))
    try:
        return func(*arguments.to_positional_array())
    except Exception as exc:
        raise OperationInvocationError(name, exc) from exc


def check_arguments(func: Callable[..., Any], arguments: Arguments, name: str) -> None:
    """Structural check of arguments against func's signature.

    Checks arity, and the class of every value whose parameter is annotated
    with a plain class. Generic or union annotations are not checked.

    Raises:
        ArgumentMismatchError: On the first mismatch.
    """
    try:
        signature = inspect.signature(func)
    # No introspectable signature: the call itself is the only check
    except (TypeError, ValueError):
        return

    try:
        bound = signature.bind(*arguments.to_positional_array())
    except TypeError as exc:
        raise ArgumentMismatchError(name, str(exc)) from exc

    hints = _parameter_hints(func)
    if not hints:
        return

    for param_name, value in bound.arguments.items():
        hint = hints.get(param_name)
        if hint is None:
            continue
        is_variadic = signature.parameters[param_name].kind is inspect.Parameter.VAR_POSITIONAL
        values = value if is_variadic else (value,)
        for item in values:
            if not _value_matches(item, hint):
                raise ArgumentMismatchError(
                    name,
                    f"parameter '{param_name}' expects {hint.__qualname__}, "
                    f"got {type(item).__qualname__}",
                )


def _parameter_hints(func: Callable[..., Any]) -> dict[str, type]:
    """Parameter annotations that are plain classes, by parameter name."""
    return {
        param: hint
        for param, hint in resolve_annotations(func).items()
        if param != "return" and _is_checkable(hint)
    }


def _is_checkable(hint: Any) -> bool:
    """Plain class usable with isinstance()."""
    if not isinstance(hint, type) or get_origin(hint) is not None:
        return False
    if hint is object:
        return False
    # Non-runtime-checkable protocols reject isinstance()
    return not getattr(hint, "_is_protocol", False) or getattr(hint, "_is_runtime_protocol", False)


def _value_matches(value: Any, hint: type) -> bool:
    if isinstance(value, hint):
        return True
    return isinstance(value, _PROMOTIONS.get(hint, ()))
