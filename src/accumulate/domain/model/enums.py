"""Domain enumerations."""

from enum import Enum


class OperationKind(Enum):
    """How an operation is bound to its provider."""

    INSTANCE = "instance"  # def name(self, ...)
    CLASS = "class"  # @classmethod
    STATIC = "static"  # @staticmethod
