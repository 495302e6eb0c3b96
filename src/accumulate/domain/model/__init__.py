"""Domain model: value objects."""

from accumulate.domain.model.arguments import NO_ARGS, Arguments, ArgumentsBuilder
from accumulate.domain.model.enums import OperationKind
from accumulate.domain.model.operation import Operation
from accumulate.domain.model.parameter import Parameter
from accumulate.domain.model.plan import CollectionPlan, ProviderPlan

__all__ = [
    "NO_ARGS",
    "Arguments",
    "ArgumentsBuilder",
    "CollectionPlan",
    "Operation",
    "OperationKind",
    "Parameter",
    "ProviderPlan",
]
