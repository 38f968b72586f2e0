"""CLI commands using Typer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from pathwrap.context import AppContext

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from pathwrap import __version__
from pathwrap.context import create_context
from pathwrap.path import Path
from pathwrap.report import EntryReport, ListingReport, PathReport
from pathwrap.types import DirectoryEntry

app = typer.Typer(
    name="pathwrap",
    help="Inspect filesystem paths",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"pathwrap v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Inspect filesystem paths."""
    pass


def _show_error(ctx: AppContext, message: str) -> None:
    ctx.console.print(Text.assemble(("✗", "red"), " ", message))


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


# ============================================================================
# Info
# ============================================================================


def _show_reports(ctx: AppContext, reports: list[PathReport]) -> None:
    """Display path reports table.

    Args:
        ctx: Application context.
        reports: One report per inspected path.
    """
    table = Table(title="Paths")
    table.add_column("Path", style="cyan")
    table.add_column("Directory")
    table.add_column("Extension")
    table.add_column("Exists")
    table.add_column("File")
    table.add_column("Directory?")
    table.add_column("Symlink")

    for report in reports:
        table.add_row(
            Text(report.path),
            Text(report.directory_name),
            Text(report.extension or "-"),
            _flag(report.exists),
            _flag(report.is_file),
            _flag(report.is_directory),
            _flag(report.is_symbolic_link),
        )

    ctx.console.print(table)


@app.command()
def info(
    paths: Annotated[list[str], typer.Argument(help="Paths to inspect")],
    json_output: Annotated[bool, typer.Option("--json", help="Emit JSON")] = False,
    _context=None,
) -> None:
    """Show what each path is. Never fails for missing paths."""
    ctx = _context or create_context()
    reports = [PathReport.from_path(Path(p, filesystem=ctx.filesystem)) for p in paths]

    if json_output:
        ctx.console.print_json(data=[r.model_dump(mode="json") for r in reports])
    else:
        _show_reports(ctx, reports)


# ============================================================================
# Contents
# ============================================================================


def _show_listing(ctx: AppContext, path: Path, entries: list[DirectoryEntry]) -> None:
    """Display directory entries table.

    Args:
        ctx: Application context.
        path: Listed directory.
        entries: Entries in enumeration order.
    """
    if not entries:
        ctx.console.print(Text(f"{path} is empty", style="yellow"))
        return

    table = Table(title=Text(str(path)))
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    for entry in entries:
        table.add_row(Text(entry.name), entry.type.value)
    ctx.console.print(table)


@app.command()
def contents(
    path: Annotated[str, typer.Argument(help="File or directory")],
    json_output: Annotated[bool, typer.Option("--json", help="Emit JSON")] = False,
    _context=None,
) -> None:
    """Print a file's text or a directory's entries."""
    ctx = _context or create_context()
    target = Path(path, filesystem=ctx.filesystem)

    try:
        result = target.contents()
    except UnicodeDecodeError as e:
        _show_error(ctx, f"{target} is not valid UTF-8: {e.reason}")
        raise typer.Exit(1) from e
    except OSError as e:
        _show_error(ctx, f"Cannot read {target}: {e.strerror or e}")
        raise typer.Exit(1) from e

    if isinstance(result, str):
        if json_output:
            ctx.console.print_json(data={"path": str(target), "text": result})
        else:
            ctx.console.print(
                result, markup=False, highlight=False, emoji=False, soft_wrap=True, end=""
            )
        return

    if json_output:
        listing = ListingReport(
            path=str(target),
            entries=[EntryReport.from_entry(entry) for entry in result],
        )
        ctx.console.print_json(listing.model_dump_json())
    else:
        _show_listing(ctx, target, result)
