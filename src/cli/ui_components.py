"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse the same tables/panels.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.products import Product
from core.domain.shapes import StretchReport


def print_banner(console: Console) -> None:
    """Print the welcome banner (can be disabled for pipelines)."""

    title = Text("SOLID-D2", style="bold cyan")
    subtitle = Text("Liskov • Single Responsibility • Open/Closed", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_section(console: Console, title: str, principle: str) -> None:
    console.rule(f"[bold]{title}[/bold] [dim]({principle})[/dim]")


def build_products_table(products: Iterable[Product], *, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Name", style="white", no_wrap=True)
    table.add_column("Color", style="cyan")
    table.add_column("Size", style="magenta")
    for p in products:
        table.add_row(p.name, p.color.value, p.size.value)
    return table


def build_stretch_panel(label: str, report: StretchReport) -> Panel:
    """Panel with before/expected/actual areas for one `stretch` call."""

    body = Text()
    body.append(f"Before stretching, area is: {report.original_area}\n")
    body.append(f"Expected area: {report.expected_area}\n")
    body.append(
        f"Actual area: {report.actual_area}",
        style="green" if report.holds else "bold red",
    )
    border = "green" if report.holds else "red"
    return Panel(body, title=Text(label, style="bold"), border_style=border)
