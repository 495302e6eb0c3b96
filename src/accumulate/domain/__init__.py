"""accumulate domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, collections.abc
"""

from accumulate.domain.exceptions import (
    AccumulateError,
    ArgumentMismatchError,
    InvalidProviderError,
    InvalidTargetTypeError,
    OperationInvocationError,
    ProducerRegistrationError,
)
from accumulate.domain.model import (
    NO_ARGS,
    Arguments,
    ArgumentsBuilder,
    CollectionPlan,
    Operation,
    OperationKind,
    Parameter,
    ProviderPlan,
)
from accumulate.domain.ports import Accumulate

__all__ = [
    # Exceptions
    "AccumulateError",
    "ArgumentMismatchError",
    "InvalidProviderError",
    "InvalidTargetTypeError",
    "OperationInvocationError",
    "ProducerRegistrationError",
    # Enums
    "OperationKind",
    # Value objects
    "NO_ARGS",
    "Arguments",
    "ArgumentsBuilder",
    "Parameter",
    "Operation",
    "ProviderPlan",
    "CollectionPlan",
    # Ports
    "Accumulate",
]
