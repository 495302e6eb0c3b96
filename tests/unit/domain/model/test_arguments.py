"""Tests for domain/model/arguments.py."""

import dataclasses

import pytest

from accumulate.domain.model.arguments import NO_ARGS, Arguments, ArgumentsBuilder


class TestArguments:
    """Tests for Arguments value object."""

    def test_default_is_empty(self) -> None:
        """Arguments() holds no values."""
        assert Arguments().values == ()
        assert len(Arguments()) == 0

    def test_values_must_be_tuple(self) -> None:
        """List values raise TypeError."""
        with pytest.raises(TypeError, match="values must be a tuple"):
            Arguments([1, 2])  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        """Assignment raises FrozenInstanceError."""
        args = Arguments((1,))
        with pytest.raises(dataclasses.FrozenInstanceError, match="cannot assign to field"):
            args.values = (2,)  # type: ignore[misc]

    def test_of(self) -> None:
        """of() keeps values in order."""
        assert Arguments.of("a", 1).values == ("a", 1)

    def test_of_without_values_is_no_args(self) -> None:
        """of() without values returns the shared empty instance."""
        assert Arguments.of() is NO_ARGS

    def test_iteration_and_len(self) -> None:
        """Iterates over values, None included."""
        args = Arguments.of("a", None, 3)
        assert list(args) == ["a", None, 3]
        assert len(args) == 3

    def test_equality(self) -> None:
        """Equal when values are equal in order."""
        assert Arguments.of(1, 2) == Arguments((1, 2))
        assert Arguments.of(1, 2) != Arguments.of(2, 1)

    def test_repr(self) -> None:
        """repr lists values like a call."""
        assert repr(Arguments.of("a", 1)) == "Arguments('a', 1)"


class TestToPositionalArray:
    """Tests for Arguments.to_positional_array."""

    def test_returns_values_in_order(self) -> None:
        """Values in insertion order."""
        assert Arguments.of("a", "b").to_positional_array() == ["a", "b"]

    def test_returns_fresh_list(self) -> None:
        """Mutating the result does not affect Arguments."""
        args = Arguments.of("a", "b")
        first = args.to_positional_array()
        first.append("c")

        assert args.to_positional_array() == ["a", "b"]
        assert args.to_positional_array() is not args.to_positional_array()

    def test_no_args_is_empty(self) -> None:
        """NO_ARGS gives an empty list."""
        assert NO_ARGS.to_positional_array() == []


class TestArgumentsBuilder:
    """Tests for ArgumentsBuilder."""

    def test_builder_factory(self) -> None:
        """Arguments.builder() returns a builder."""
        assert isinstance(Arguments.builder(), ArgumentsBuilder)

    def test_add_argument_chains(self) -> None:
        """add_argument returns the builder."""
        builder = ArgumentsBuilder()
        assert builder.add_argument(1) is builder

    def test_build_preserves_order(self) -> None:
        """Values in the order they were added."""
        args = ArgumentsBuilder().add_argument("x").add_argument(2).add_argument(None).build()
        assert args.values == ("x", 2, None)

    def test_empty_build_is_no_args(self) -> None:
        """Empty builder builds NO_ARGS."""
        assert ArgumentsBuilder().build() is NO_ARGS

    def test_build_returns_independent_snapshots(self) -> None:
        """Later additions do not change earlier builds."""
        builder = ArgumentsBuilder().add_argument(1)
        first = builder.build()
        builder.add_argument(2)
        second = builder.build()

        assert first.values == (1,)
        assert second.values == (1, 2)

    def test_repeated_build_from_same_state(self) -> None:
        """Building twice gives equal Arguments."""
        builder = ArgumentsBuilder().add_argument("a")
        assert builder.build() == builder.build()

    def test_accepts_any_value(self) -> None:
        """Any object is accepted as is."""
        marker = object()
        args = ArgumentsBuilder().add_argument(marker).add_argument([1]).build()
        assert args.values[0] is marker
