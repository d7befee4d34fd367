"""Rich-powered summary table for a conversion run."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from ..driver import ConversionStats


def print_summary(stats: ConversionStats, console: Console, top: int = 10) -> None:
    """Render line counts and the most common rejection reasons.

    Args:
        stats:   Counters returned by :func:`convert_stream`.
        console: Target console; the CLI passes a stderr console so the
                 record stream on stdout stays clean.
        top:     How many rejection reasons to list.
    """
    totals = Table(title="Conversion summary", box=box.SIMPLE_HEAVY)
    totals.add_column("Lines")
    totals.add_column("Count", justify="right", style="cyan")
    totals.add_row("processed", str(stats.lines))
    totals.add_row("emitted", str(stats.records), style="green")
    totals.add_row("rejected", str(stats.rejected), style="red" if stats.rejected else "")
    totals.add_row("blank", str(stats.skipped), style="dim")
    console.print(totals)

    reasons = stats.rejections.most_common(top)
    if not reasons:
        return

    per_field = stats.rejections.by_field()
    table = Table(title=f"Top {top} rejection reasons", box=box.ROUNDED)
    table.add_column("Field")
    table.add_column("Reason", overflow="fold", max_width=60)
    table.add_column("Count", justify="right", style="cyan")
    table.add_column("Field total", justify="right", style="dim")
    for state, reason, count in reasons:
        table.add_row(state.name, reason, str(count), str(per_field[state]))
    console.print(table)
