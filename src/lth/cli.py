"""
Command line interface for the Latex Template Handler.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .api import RemoteFetcher
from .config import Settings, get_settings
from .pipeline import ScaffoldError, ScaffoldExecutor, ScaffoldReport, UnknownTemplate
from .templates import TemplateRegistry, default_registry
from .util import ConsolePrompt, FilesystemBuilder
from .vcs import GitInitializer

console = Console()
app = typer.Typer(help="Scaffold LaTeX and pandoc document projects from templates.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _describe_validation_error(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )


def _load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except ValidationError as exc:
        console.print(f"[bold red]Configuration error:[/] {escape(_describe_validation_error(exc))}")
        raise typer.Exit(code=2) from exc


def _configure_logging(level_name: str) -> None:
    env_override = _load_settings_or_exit().log_level
    level_str = (env_override or level_name or "warning").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_destination(value: Path) -> Path:
    """Ensure the destination exists and is a directory."""
    resolved = value.expanduser().resolve()
    if not resolved.is_dir():
        raise typer.BadParameter(f"{resolved} is not a directory")
    return resolved


def build_executor(settings: Settings, registry: Optional[TemplateRegistry] = None) -> ScaffoldExecutor:
    """
    Wire the executor to the real network, filesystem, terminal, and git.
    """
    return ScaffoldExecutor(
        registry=registry or default_registry(),
        fetcher=RemoteFetcher(timeout=settings.http_timeout),
        builder=FilesystemBuilder(),
        prompt=ConsolePrompt(console),
        initializer=GitInitializer(commit_message=settings.commit_message),
    )


def _print_templates(registry: TemplateRegistry) -> None:
    table = Table(title="List of templates")
    table.add_column("Template", style="bold blue")
    table.add_column("Description")
    for identifier, description in registry.all():
        table.add_row(identifier, description)
    console.print(table)


def _print_scaffold_report(report: ScaffoldReport) -> None:
    table = Table(title="Scaffold Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)


def _show_tree(root: Path, settings: Settings) -> None:
    """Best-effort listing of the new project; failures never fail the run."""
    if not settings.show_tree:
        return
    try:
        result = subprocess.run(
            [settings.tree_command, "-C", str(root)],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.debug("Skipping directory listing (%s)", exc)
        return
    console.print(Text.from_ansi(result.stdout.rstrip("\n")))


def _list_templates_callback(value: bool) -> None:
    if value:
        _print_templates(default_registry())
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show lth version and exit.",
        is_flag=True,
    ),
    list_templates: bool = typer.Option(
        False,
        "--list",
        "-l",
        help="Display the available templates and exit.",
        callback=_list_templates_callback,
        is_eager=True,
        expose_value=False,
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print("Latex Template Handler [bold]lth[/]")
        console.print(f"Version: [underline blue]{__version__}[/]")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command("list")
def list_command() -> None:
    """
    Display the available templates.
    """
    _print_templates(default_registry())


@app.command()
def create(
    template: str = typer.Argument(..., help="Template name (see `lth list`)."),
    path: Path = typer.Argument(
        ...,
        help="Existing directory that will hold the new project folder.",
        callback=_resolve_destination,
    ),
) -> None:
    """
    Create a new project folder inside PATH from TEMPLATE.
    """
    settings = _load_settings_or_exit()
    executor = build_executor(settings)

    console.print(f"[blue]Creating the new template at {escape(str(path))}[/]")
    try:
        report = executor.run(template, path)
    except UnknownTemplate as exc:
        console.print(f"[bold red]Invalid template name![/] {escape(repr(exc.identifier))}")
        console.print("Use [cyan]lth list[/] to see the available templates.")
        raise typer.Exit(code=1) from exc
    except ScaffoldError as exc:
        console.print(f"[bold red]Scaffolding failed:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    _print_scaffold_report(report)
    console.print(f"[bold green]Created the new folder at {escape(str(report.root))}[/]")
    _show_tree(report.root, settings)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
