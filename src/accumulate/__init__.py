"""accumulate - collect values of a type from many provider objects."""

import logging

__version__ = "0.1.0"

from accumulate.application import (
    Accumulators,
    ConsoleConfig,
    ConsoleReporter,
    ProducerRegistry,
)
from accumulate.domain import (
    NO_ARGS,
    Accumulate,
    AccumulateError,
    ArgumentMismatchError,
    Arguments,
    ArgumentsBuilder,
    CollectionPlan,
    InvalidProviderError,
    InvalidTargetTypeError,
    Operation,
    OperationInvocationError,
    OperationKind,
    ProducerRegistrationError,
    ProviderPlan,
)
from accumulate.infrastructure import OperationInspector

# Library: never configure handlers, leave it to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NO_ARGS",
    "Accumulate",
    "AccumulateError",
    "Accumulators",
    "ArgumentMismatchError",
    "Arguments",
    "ArgumentsBuilder",
    "CollectionPlan",
    "ConsoleConfig",
    "ConsoleReporter",
    "InvalidProviderError",
    "InvalidTargetTypeError",
    "Operation",
    "OperationInspector",
    "OperationInvocationError",
    "OperationKind",
    "ProducerRegistrationError",
    "ProducerRegistry",
    "ProviderPlan",
    "__version__",
]
