"""Accumulate marker: opt-in capability for providers."""

from abc import ABC


class Accumulate(ABC):  # noqa: B024
    """Marker for objects whose operations may be collected.

    No required methods. Subclass it, or register an existing class:

        Accumulate.register(LegacyRepository)

    Every public operation on the provider's runtime type whose declared
    return type matches the requested target is invoked during collection.
    """

    __slots__ = ()
