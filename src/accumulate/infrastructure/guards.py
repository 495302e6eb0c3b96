"""FAIL-FIRST input guards shared by collection entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from accumulate.domain.exceptions import InvalidProviderError, InvalidTargetTypeError
from accumulate.domain.ports import Accumulate

if TYPE_CHECKING:
    from collections.abc import Sequence


def require_target_type(target_type: Any) -> type:
    """Validate that target_type can be used in issubclass() checks.

    Raises:
        InvalidTargetTypeError: Not a class, or a class that rejects
            subclass checks (e.g. a non-runtime-checkable Protocol).
    """
    if not isinstance(target_type, type):
        raise InvalidTargetTypeError(target_type)
    try:
        issubclass(object, target_type)
    except TypeError as exc:
        raise InvalidTargetTypeError(target_type) from exc
    return target_type


def require_providers(providers: Sequence[Any]) -> None:
    """Validate every provider before any of them is touched.

    Raises:
        InvalidProviderError: First provider that is not Accumulate.
    """
    for position, provider in enumerate(providers):
        if not isinstance(provider, Accumulate):
            raise InvalidProviderError(type(provider), position)
