"""
Rich-based console output for the command line.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


class RichUIAdapter:
    """Renders tool results on a Rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.theme = Theme({
            "info": "cyan",
            "success": "green",
            "warning": "yellow",
            "error": "red",
            "critical": "red bold",
            "debug": "dim",
            "panel.border": "cyan",
            "panel.title": "cyan bold",
        })
        if console is None:
            console = Console(theme=self.theme)
        else:
            console.push_theme(self.theme)
        self.console = console

    def log(self, message: str, style: str = "info") -> None:
        self.console.print(f"[{style}]{escape(str(message))}[/{style}]")

    def panel(self, content: str, title: str = "", **kwargs) -> None:
        self.console.print(Panel(content, title=title, **kwargs))

    def print_json(self, data: Any) -> None:
        self.console.print_json(data=data)

    def diagnostics_table(self, title: str, records: List[Dict[str, Any]], style: str) -> None:
        """
        Display diagnostic records as a table.

        Args:
            title: The table title
            records: Records in payload form (code, file, line, column, message)
            style: Style applied to the code column
        """
        table = Table(title=title, show_lines=True)
        table.add_column("Code", style=style, no_wrap=True)
        table.add_column("Location", no_wrap=True)
        table.add_column("Message")
        for record in records:
            location = f"{record['file']}:{record['line']}:{record['column']}"
            # Rendered diagnostics contain brackets that Rich would read as markup
            table.add_row(Text(record["code"]), Text(location), Text(record["message"]))
        self.console.print(table)

    def validation_report(self, payload: Dict[str, Any]) -> None:
        """Display the payload of a validate call."""
        if payload["warnings"]:
            self.diagnostics_table("Warnings", payload["warnings"], "warning")
        if payload["buildErrors"]:
            self.diagnostics_table("Build errors", payload["buildErrors"], "error")

        test_results = payload["testResults"]
        if test_results is None:
            reason = "build failed" if payload["buildErrors"] else "no test verdict in output"
            self.panel(f"Tests not evaluated ({reason})", "Tests", border_style="yellow")
        elif test_results == "PASSED":
            self.panel("PASSED", "Tests", border_style="green")
        else:
            self.console.print(Panel(Text(test_results), title="Tests", border_style="red"))

    def status_table(self, rows: List[Tuple[str, bool, str]]) -> None:
        table = Table()
        table.add_column("Check")
        table.add_column("Status")
        table.add_column("Details")
        for name, ok, details in rows:
            table.add_row(name, "[success]OK[/success]" if ok else "[error]ERROR[/error]", Text(details))
        self.console.print(table)


class RichLoggingHandler(RichHandler):
    """Custom Rich logging handler with level names styled by severity."""

    LEVEL_STYLES = (
        (logging.CRITICAL, "red bold"),
        (logging.ERROR, "red"),
        (logging.WARNING, "yellow"),
        (logging.INFO, "cyan"),
    )

    def get_level_text(self, record: logging.LogRecord) -> Text:
        style = next((s for level, s in self.LEVEL_STYLES if record.levelno >= level), "dim")
        return Text.styled(record.levelname.ljust(8), style)
