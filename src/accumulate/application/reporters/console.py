"""Console reporter: CollectionPlan → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from accumulate.domain.model.plan import CollectionPlan, ProviderPlan


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        title: Header rule text.
        width: Console width in characters.
        color: Emit ANSI styles. False gives plain text.
        show_parameters: Show the parameters column.
        show_empty_providers: List providers without matching operations.
    """

    title: str = "COLLECTION PLAN"
    width: int = 120
    color: bool = True
    show_parameters: bool = True
    show_empty_providers: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, plan: CollectionPlan) -> str:
        """Format collection plan as rich formatted string.

        Args:
            plan: Plan to format.

        Returns:
            Header with totals, then one table per provider.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, plan)
        for provider in plan.providers:
            self._render_provider(console, provider)

        return output.getvalue()

    def _render_header(self, console: Console, plan: CollectionPlan) -> None:
        console.print()
        console.rule(f"[bold]{self._config.title}[/bold]")
        console.print()
        console.print(
            f"[bold]Target:[/bold] {plan.target_type.__qualname__}  "
            f"[bold]Providers:[/bold] {len(plan.providers)}  "
            f"[bold]Operations:[/bold] {plan.total}"
        )
        console.print()

    def _render_provider(self, console: Console, provider: ProviderPlan) -> None:
        if not provider.operations:
            if self._config.show_empty_providers:
                console.print(f"[yellow]{provider.provider}[/yellow]: no matching operations")
                console.print()
            return

        table = Table(title=provider.provider, title_justify="left")
        table.add_column("#", justify="right")
        table.add_column("Operation", style="cyan")
        table.add_column("Kind")
        table.add_column("Returns", style="green")
        if self._config.show_parameters:
            table.add_column("Parameters")

        for index, operation in enumerate(provider.operations, start=1):
            row = [
                str(index),
                operation.qualified_name,
                operation.kind.value,
                operation.return_annotation,
            ]
            if self._config.show_parameters:
                row.append(", ".join(str(p) for p in operation.parameters) or "-")
            table.add_row(*row)

        console.print(table)
        console.print()
