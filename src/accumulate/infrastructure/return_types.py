"""Declared return type resolution.

Turns a function's return annotation into the tuple of classes it
promises to return, or None when it promises nothing usable:

    -> Widget            (Widget,)
    -> list[Widget]      (list,)
    -> Widget | Gadget   (Widget, Gadget)
    -> Widget | None     None  (None is never a target value)
    -> None / Any / T    None
    (no annotation)      None

Annotations are evaluated one by one: an unresolvable parameter annotation
(e.g. a name imported under TYPE_CHECKING) never hides the return type.
"""

from __future__ import annotations

import inspect
import logging
import types
from typing import TYPE_CHECKING, Any, NewType, Union, get_args, get_origin

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_UNION_ORIGINS = frozenset({Union, types.UnionType})


def resolve_annotations(func: Callable[..., Any]) -> dict[str, Any]:
    """Evaluated annotations of func, by name.

    String annotations are evaluated against the defining module's globals.
    Entries that cannot be evaluated are left out.

    Args:
        func: Function or bound method (not a static/classmethod wrapper).
    """
    # Bound methods resolve through their function
    func = getattr(func, "__func__", func)
    try:
        raw = inspect.get_annotations(func)
    # Objects without annotations support (partial, instances, ...)
    except (TypeError, ValueError, NameError) as exc:
        logger.debug("cannot read annotations of %r: %s", func, exc)
        return {}

    globalns = getattr(inspect.unwrap(func), "__globals__", {})
    resolved: dict[str, Any] = {}
    for name, annotation in raw.items():
        if not isinstance(annotation, str):
            resolved[name] = annotation
            continue
        try:
            resolved[name] = eval(annotation, globalns)  # noqa: S307
        # Names imported under TYPE_CHECKING, typos, invalid expressions
        except (NameError, AttributeError, SyntaxError, TypeError) as exc:
            logger.debug("cannot resolve %s annotation %r of %r: %s", name, annotation, func, exc)
    return resolved


def resolve_return_types(func: Callable[..., Any]) -> tuple[type, ...] | None:
    """Resolve the declared return type of func.

    Only the return annotation has to resolve; parameter annotations are
    not looked at.

    Args:
        func: Function or bound method (not a static/classmethod wrapper).

    Returns:
        Tuple of classes, None if the function declares no usable return type.
    """
    annotations = resolve_annotations(func)
    if "return" not in annotations:
        return None
    return normalize_annotation(annotations["return"])


def normalize_annotation(annotation: Any) -> tuple[type, ...] | None:
    """Normalize a resolved annotation to the classes it denotes."""
    if annotation is None or annotation is types.NoneType or annotation is Any:
        return None

    if isinstance(annotation, NewType):
        return normalize_annotation(annotation.__supertype__)

    origin = get_origin(annotation)
    if origin in _UNION_ORIGINS:
        members: list[type] = []
        for arg in get_args(annotation):
            resolved = normalize_annotation(arg)
            # Every member must be a class: union is a subtype only if all members are
            if resolved is None:
                return None
            members.extend(resolved)
        return tuple(dict.fromkeys(members))

    if origin is not None:
        annotation = origin

    if isinstance(annotation, type):
        return (annotation,)
    return None
