"""Console reporter: validation failures → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from validkit.domain.exceptions.validation import ValidationException


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        title: Header shown above the failures table
        show_exception_type: Add a column with each exception's class name
        width: Console width in characters
    """

    title: str = "VALIDATION FAILED"
    show_exception_type: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


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

    def report(self, failures: tuple[ValidationException, ...]) -> str:
        """Format failures as a rich table.

        Args:
            failures: Exceptions built from failed results

        Returns:
            Formatted string with colors and a table.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        if not failures:
            console.print("[bold green]All rules passed[/bold green]")
            return output.getvalue()

        console.rule(f"[bold]{self._config.title}[/bold]")
        console.print(f"[bold]Failures:[/bold] {len(failures)}")
        console.print(self._build_table(failures))

        return output.getvalue()

    def _build_table(self, failures: tuple[ValidationException, ...]) -> Table:
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        if self._config.show_exception_type:
            table.add_column("Exception", style="yellow")
        table.add_column("Message")

        for index, failure in enumerate(failures, start=1):
            # Text() keeps brackets in messages from being parsed as markup
            cells = [str(index)]
            if self._config.show_exception_type:
                cells.append(type(failure).__name__)
            table.add_row(*cells, Text(failure.message))

        return table
