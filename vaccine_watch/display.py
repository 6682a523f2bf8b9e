"""Console rendering of poll results."""

from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .watcher import CycleReport


def render_report(report: CycleReport, console: Optional[Console] = None) -> None:
    console = console or Console()

    header = Text()
    header.append(report.polled_at.strftime("%Y-%m-%d"), style="bright_black")
    header.append(" ")
    header.append(report.polled_at.strftime("%H:%M:%S"), style="bold")
    console.print(header)

    message = report.ranked.filtered_message
    if message is not None:
        console.print(message)

    if not report.ranked.locations:
        return

    table = Table(box=box.SIMPLE, show_header=False, pad_edge=False)
    table.add_column("available", justify="right", style="bold", min_width=5)
    table.add_column("region")
    table.add_column("organization")
    table.add_column("link", style="bright_black", overflow="fold")

    for location in report.ranked.locations:
        # Page text is rendered literally, never as console markup.
        table.add_row(
            str(location.available_count),
            Text(location.region),
            Text(location.organization),
            Text(location.booking_link),
        )

    console.print(table)
