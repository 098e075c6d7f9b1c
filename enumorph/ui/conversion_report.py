"""Rich output for enumorph conversions.

This module provides the ConversionReport class, which renders conversion
results and enum member listings as Rich tables.

Example:
    from enumorph.ui import ConversionReport

    report = ConversionReport()
    report.display_conversions(traces, target=Color, verbose=True)
    report.display_summary(ConversionSummary.from_traces(traces))
"""

from enum import Enum
from typing import List, Optional, Sequence, Type

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from enumorph.models import ConversionSummary, ConversionTrace, MatchStage


class ConversionReport:
    """Rich-based display of conversion results.

    Args:
        console: Optional Rich Console instance for output. If None, creates
            a new Console. Pass a custom Console for testing (e.g., with
            StringIO file for output capture).

    Attributes:
        console: The Rich Console instance used for all output.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def display_members(self, target: Type[Enum]) -> None:
        """Display the members of an enum in definition order.

        Args:
            target: The enum type to list.
        """
        table = Table(title=f"{target.__name__} members")
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Name", style="magenta")
        table.add_column("Value", style="white")

        for ordinal, member in enumerate(target):
            table.add_row(str(ordinal), member.name, repr(member.value))

        self.console.print(table)

    def display_conversions(
        self,
        traces: Sequence[ConversionTrace],
        target: Type[Enum],
        verbose: bool = False,
        matcher_labels: Optional[List[str]] = None,
        fallback_labels: Optional[List[str]] = None,
    ) -> None:
        """Display one row per converted value.

        Args:
            traces: Conversion traces, in input order.
            target: The target enum type (used in the title).
            verbose: Show which stage and matcher produced each result.
            matcher_labels: Descriptions of the primary matchers.
            fallback_labels: Descriptions of the fallback matchers.
        """
        if not traces:
            self.console.print("[yellow]No values to convert.[/yellow]")
            return

        table = Table(title=f"Conversions to {target.__name__}")
        table.add_column("Input", style="white")
        table.add_column("Result")
        if verbose:
            table.add_column("Stage", style="magenta")
            table.add_column("Matcher", style="dim")

        for trace in traces:
            if trace.matched:
                result_str = f"[green]{target.__name__}.{trace.result.name}[/green]"
            else:
                result_str = "[red]no match[/red]"
            row = [escape(repr(trace.value)), result_str]
            if verbose:
                row.append(trace.stage.value)
                row.append(self._matcher_label(trace, matcher_labels, fallback_labels))
            table.add_row(*row)

        self.console.print(table)

    def display_summary(self, summary: ConversionSummary) -> None:
        """Display aggregated conversion statistics."""
        summary_text = (
            f"Values converted: {summary.total}\n"
            f"Matched: {summary.matched} "
            f"(primary: {summary.primary_hits}, fallback: {summary.fallback_hits})\n"
            f"Unmatched: {summary.unmatched}"
        )
        border_style = "green" if summary.unmatched == 0 else "yellow"
        self.console.print(Panel(summary_text, title="Summary", border_style=border_style))

    def _matcher_label(
        self,
        trace: ConversionTrace,
        matcher_labels: Optional[List[str]],
        fallback_labels: Optional[List[str]],
    ) -> str:
        """Describe the matcher that produced a trace, or '-' if none did."""
        if trace.matcher_index is None:
            return "-"
        labels = matcher_labels if trace.stage is MatchStage.PRIMARY else fallback_labels
        if labels and trace.matcher_index < len(labels):
            return escape(labels[trace.matcher_index])
        return f"#{trace.matcher_index}"
