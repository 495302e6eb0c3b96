"""Domain exceptions: all public errors of accumulate.

Every error visible to users is defined here.
Infrastructure/Application raise these, they do not define their own.
"""

from __future__ import annotations

from typing import Any


class AccumulateError(Exception):
    """Base for all accumulate exceptions.

    Allows: except AccumulateError to catch all library errors.
    """


class InvalidTargetTypeError(AccumulateError, TypeError):
    """Target type must be a class.

    Inherits TypeError for semantic correctness (expected a class, got X).

    Attributes:
        got: Value passed as target type.
    """

    def __init__(self, got: Any) -> None:
        """Initialize with the rejected target."""
        self.got = got
        super().__init__(f"target type must be a class, got {got!r}")


class InvalidProviderError(AccumulateError, TypeError):
    """Provider does not implement the Accumulate marker.

    Attributes:
        got: Type of the rejected provider.
        position: Index of the provider in the supplied sequence.
    """

    def __init__(self, got: type, position: int = 0) -> None:
        """Initialize with provider type and its position."""
        self.got = got
        self.position = position
        super().__init__(
            f"provider #{position} must implement Accumulate, got {got.__qualname__}"
        )


class ArgumentMismatchError(AccumulateError, TypeError):
    """Arguments do not fit the signature of a selected operation.

    Illegal-argument condition: arity differs, or a value is not an
    instance of the class its parameter is annotated with.

    Attributes:
        operation: Qualified name of the operation.
        reason: What did not match.
    """

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize with operation name and reason."""
        # FAIL-FIRST validation
        if not operation:
            raise ValueError("operation must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.operation = operation
        self.reason = reason
        super().__init__(f"arguments do not match {operation}(): {reason}")


class OperationInvocationError(AccumulateError, RuntimeError):
    """Operation could not be accessed or raised during its own execution.

    Wraps the original exception. Preserves original traceback via __cause__.

    Attributes:
        operation: Qualified name of the operation.
        original: Original exception.
    """

    def __init__(self, operation: str, original: BaseException) -> None:
        """Initialize with operation name and original exception."""
        self.operation = operation
        self.original = original
        super().__init__(
            f"{operation}() raised: {type(original).__name__}: {original}"
        )
        self.__cause__ = original


class ProducerRegistrationError(AccumulateError, ValueError):
    """Producer rejected by ProducerRegistry at registration time.

    Attributes:
        producer: repr of the rejected producer.
        reason: Why it was rejected.
    """

    def __init__(self, producer: str, reason: str) -> None:
        """Initialize with producer description and reason."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.producer = producer
        self.reason = reason
        super().__init__(f"cannot register {producer}: {reason}")
