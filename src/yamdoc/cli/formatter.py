# src/yamdoc/cli/formatter.py
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from yamdoc.render.markdown import TableRow

console = Console()
err_console = Console(stderr=True)


class YamDocFormatter:
    """
    Terminal presentation for the CLI: the rich table view of the rows
    and the error output on stderr.
    """

    def print_table(self, rows: List[TableRow], title: str = ""):
        """Renders the flattened rows as a rich table on stdout."""
        table = Table(title=title or None, show_header=True, header_style="bold magenta")
        table.add_column("Name", style="cyan")
        table.add_column("Value")
        table.add_column("Description", style="dim")

        for row in rows:
            table.add_row(escape(row.name), escape(row.value), escape(row.description))

        console.print(table)

    def print_error(self, message: str):
        """Prints an error message on stderr."""
        err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
