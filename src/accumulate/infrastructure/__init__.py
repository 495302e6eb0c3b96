"""accumulate infrastructure: runtime introspection and invocation."""

from accumulate.infrastructure.guards import require_providers, require_target_type
from accumulate.infrastructure.introspection import OperationInspector, describe_callable
from accumulate.infrastructure.invocation import (
    bind_operation,
    call_with_arguments,
    check_arguments,
    invoke_operation,
)
from accumulate.infrastructure.return_types import (
    normalize_annotation,
    resolve_annotations,
    resolve_return_types,
)

__all__ = [
    "OperationInspector",
    "bind_operation",
    "call_with_arguments",
    "check_arguments",
    "describe_callable",
    "invoke_operation",
    "normalize_annotation",
    "require_providers",
    "require_target_type",
    "resolve_annotations",
    "resolve_return_types",
]
