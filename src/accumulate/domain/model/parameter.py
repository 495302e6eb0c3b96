"""Operation parameter value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Parameter:
    """Parameter of a provider operation (bound parameter excluded).

    Attributes:
        name: Parameter name
        annotation: Type annotation as string, None if untyped
        has_default: Parameter may be omitted
        is_positional_only: Before / in signature
        is_keyword_only: After * in signature
        is_variadic: *args parameter
        is_variadic_keyword: **kwargs parameter
    """

    name: str
    annotation: str | None = None
    has_default: bool = False
    is_positional_only: bool = False
    is_keyword_only: bool = False
    is_variadic: bool = False
    is_variadic_keyword: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")

        if self.is_variadic and self.is_variadic_keyword:
            raise ValueError("parameter cannot be both *args and **kwargs")

        if self.is_positional_only and self.is_keyword_only:
            raise ValueError("parameter cannot be both positional-only and keyword-only")

        if (self.is_variadic or self.is_variadic_keyword) and self.has_default:
            raise ValueError("variadic parameter cannot have a default")

    def __str__(self) -> str:
        prefix = "**" if self.is_variadic_keyword else "*" if self.is_variadic else ""
        text = f"{prefix}{self.name}"
        if self.annotation is not None:
            text = f"{text}: {self.annotation}"
        if self.has_default:
            text = f"{text} = ..."
        return text
