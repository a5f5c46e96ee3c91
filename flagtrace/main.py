# Copyright (c) 2025 GÖKSEL ÖZKAN
# This software is released under the MIT License.

import typer
from typing import Optional
from pathlib import Path
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from flagtrace.debug.config import parse_flag_value
from flagtrace.debug.registry import DebugRegistry
from flagtrace.src.core.config import DebugSettings
from flagtrace.src.core.errors import FlagTraceError, MalformedConfigEntry
from flagtrace.src.core.logging import configure_logging

EXIT_DISABLED = 1
EXIT_MALFORMED = 2


def _settings_callback(
    ctx: typer.Context,
    settings_path: Optional[Path] = typer.Option(None, "--settings", "-s", help="Path to settings.yaml"),
):
    """Load settings and apply logging configuration before any command."""
    try:
        settings = DebugSettings.load(settings_path) if settings_path else DebugSettings()
    except FlagTraceError as e:
        console.print(Panel.fit(f"[bold red]{e}[/bold red]", border_style="red", title="Error"))
        raise typer.Exit(code=EXIT_MALFORMED)
    configure_logging(
        level=settings.logging.level,
        log_to_file=settings.logging.log_to_file,
        log_dir=settings.logging.log_dir,
    )
    ctx.obj = settings


app = typer.Typer(
    help="FlagTrace: debug flag inspector",
    add_completion=False,  # Hide install-completion and show-completion from --help
    callback=_settings_callback
)
console = Console()


def _load(ctx: typer.Context, path: Path, skip_malformed: bool) -> DebugRegistry:
    settings: DebugSettings = ctx.obj or DebugSettings()
    policy = "skip" if skip_malformed else settings.flags.on_malformed
    registry = DebugRegistry(on_malformed=policy)
    try:
        result = registry.load_config(path)
    except MalformedConfigEntry as e:
        console.print(Panel.fit(f"[bold red]{e}[/bold red]", border_style="red", title="Malformed flag file"))
        raise typer.Exit(code=EXIT_MALFORMED)
    if not result.found:
        console.print(f"[yellow]No flag file at {path}, nothing loaded.[/yellow]")
    for token in result.skipped:
        console.print(f"[yellow]Skipped malformed entry:[/yellow] {token}")
    return registry


@app.command()
def show(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Flag file to read"),
    skip_malformed: bool = typer.Option(False, "--skip-malformed", help="Skip entries without '=' instead of failing"),
):
    """
    List the flags defined in a flag file.
    """
    registry = _load(ctx, path, skip_malformed)
    flags = registry.flags()
    if not flags:
        console.print("[dim]No flags defined.[/dim]")
        return

    table = Table(title=str(path))
    table.add_column("Flag", style="cyan")
    table.add_column("Type")
    table.add_column("Value", style="bold")
    table.add_column("Enabled")
    for name in sorted(flags):
        value = flags[name]
        kind = "bool" if isinstance(value, bool) else "int"
        enabled = registry.is_enabled(name)
        table.add_row(name, kind, str(value).lower() if kind == "bool" else str(value),
                      "[green]yes[/green]" if enabled else "[red]no[/red]")
    console.print(table)


@app.command()
def check(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Flag file to read"),
    flag: str = typer.Argument(..., help="Flag name"),
    value: Optional[str] = typer.Argument(None, help="Check value: true, false or an integer threshold"),
    skip_malformed: bool = typer.Option(False, "--skip-malformed", help="Skip entries without '=' instead of failing"),
):
    """
    Check whether a flag is enabled. Exits 0 when enabled, 1 otherwise.
    """
    registry = _load(ctx, path, skip_malformed)
    check_value = parse_flag_value(value.strip()) if value is not None else None
    if registry.is_enabled(flag, check_value):
        console.print(f"[bold green]✓ {flag} is enabled[/bold green]")
        return
    console.print(f"[bold red]✗ {flag} is disabled[/bold red]")
    raise typer.Exit(code=EXIT_DISABLED)


if __name__ == "__main__":
    app()
