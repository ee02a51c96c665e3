"""Typer entry point: one command per vignette."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from pydantic import ValidationError
from rich.markup import escape

from cli.ui_components import (
    build_products_table,
    build_stretch_panel,
    print_banner,
    print_section,
)
from core.config import AppSettings
from core.logging_config import setup_logging
from core.services.walkthroughs import run_liskov, run_open_closed, run_single_responsibility

app = typer.Typer(
    no_args_is_help=True,
    help="Console walkthroughs of three SOLID principles.",
)

_console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
    log_level: str | None = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR."),
) -> None:
    overrides = {"log_level": log_level} if log_level else {}
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        if log_level and any("log_level" in err["loc"] for err in exc.errors()):
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
        _console.print(f"[red]Invalid settings:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    setup_logging(settings.log_level)
    ctx.obj = settings

    if settings.show_banner and not no_banner:
        print_banner(_console)


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()


@app.command()
def liskov() -> None:
    """Rectangle vs Square: a subtype that breaks its base contract."""

    print_section(_console, "Shapes", "Liskov Substitution")
    result = run_liskov()

    _console.print(f"Rectangle(10, 20) -> {result.rectangle}")
    _console.print(f"Square(5) -> {result.square}")
    _console.print(f"Square(5) after sq.width = 10 -> {result.mutated_square}")
    _console.print(f"Square().set_width(10) -> area {result.coupled_square_area}")

    for label, report in result.stretches:
        _console.print(build_stretch_panel(f"stretch({label})", report))

    broken = [label for label, report in result.stretches if not report.holds]
    if broken:
        _console.print(
            f"[yellow]Substitution broken for:[/yellow] {', '.join(broken)}"
        )


@app.command(name="single-responsibility")
def single_responsibility(
    ctx: typer.Context,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="File to save the journal to (defaults to SOLID_D2_JOURNAL_PATH).",
    ),
) -> None:
    """Journal keeps entries; PersistenceManager saves them."""

    settings = _settings(ctx)
    target = output or settings.journal_path

    print_section(_console, "Journal", "Single Responsibility")
    try:
        result = run_single_responsibility(target)
    except OSError as exc:
        logger.debug("journal save failed", exc_info=True)
        _console.print(f"[red]Could not save journal to {escape(str(target))}:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    _console.print(str(result.journal), markup=False, highlight=False)
    _console.print(f"[green]Saved journal to:[/green] {escape(str(result.saved_to))}")


@app.command(name="open-closed")
def open_closed() -> None:
    """Ad-hoc filter methods vs the Specification pattern."""

    print_section(_console, "Products", "Open/Closed")
    result = run_open_closed(on_step=lambda step: logger.debug("filter step: %s", step))

    _console.print(build_products_table(result.products, title="Catalogue"))
    _console.print(build_products_table(result.red_by_method, title="Red products (filter_by_color)"))
    _console.print(
        build_products_table(result.green_by_spec, title="Green products based on the new filter")
    )
    _console.print(
        build_products_table(result.large_green_by_spec, title="Green and large (AndSpecification)")
    )


@app.command(name="all")
def run_all(
    ctx: typer.Context,
    output: Path | None = typer.Option(None, "--output", "-o", help="Journal file path."),
) -> None:
    """Run every vignette in order."""

    liskov()
    single_responsibility(ctx, output=output)
    open_closed()


def run() -> None:
    app()
