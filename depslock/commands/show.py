# depslock/commands/show.py

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from depslock.core.console import ConsoleAware
from depslock.core.exceptions import DepsLockError, InvalidUsageError
from depslock.core.project_locking import create_reader_writer

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def show_command(
    project_dir: Optional[Path],
    configuration: Optional[str],
    lock_file: Optional[Path],
    buildscript: bool,
    legacy: bool,
    console_awr: ConsoleAware
):
    """Command wrapper for show command."""
    lockfiles = create_reader_writer(
        project_dir, lock_file, buildscript, console_awr.console, console_awr.verbose
    )

    if legacy:
        if not configuration:
            raise InvalidUsageError("--legacy requires a configuration name")
        lines = lockfiles.read_lockfile(configuration)
        if not lines:
            console_awr.warn(f"No locks recorded for {configuration}")
            return
        console_awr.print(f"🔒 [bold cyan]{configuration}[/bold cyan]")
        for line in lines:
            console_awr.print(f"  {line}")
        return

    dependencies = lockfiles.read_unique_lockfile()
    if configuration is not None:
        if configuration not in dependencies:
            console_awr.warn(f"No locks recorded for {configuration}")
            return
        dependencies = {configuration: dependencies[configuration]}

    if not dependencies:
        console_awr.warn(f"No locks recorded in {lockfiles.unique_lockfile_path()}")
        return

    table = Table(title="Locked dependencies")
    table.add_column("Configuration", style="bold")
    table.add_column("Dependencies", style="cyan")
    for name in sorted(dependencies):
        table.add_row(name, "\n".join(dependencies[name]) or "[dim]none[/]")
    console_awr.print(table)

def register(app):
    """Register the show command with the Typer app."""

    @app.command()
    def show(
        configuration: Optional[str] = typer.Argument(
            None,
            help="Only show this configuration"
        ),
        project_dir: Optional[Path] = typer.Option(
            None,
            "--project-dir",
            "-d",
            help="Project directory (default: current directory)"
        ),
        lock_file: Optional[Path] = typer.Option(
            None,
            "--lockfile",
            help="Custom location of the unified lock file, relative to the project directory"
        ),
        buildscript: bool = typer.Option(
            False,
            "--buildscript",
            help="Show build script locks instead of project locks"
        ),
        legacy: bool = typer.Option(
            False,
            "--legacy",
            help="Read the per-configuration lock file"
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            help="Show detailed output"
        )
    ):
        """Show locked dependencies."""
        console = Console(log_path=False)
        console_awr = ConsoleAware(console=console, verbose=verbose)

        try:
            show_command(project_dir, configuration, lock_file, buildscript, legacy, console_awr)

        except DepsLockError as e:
            console_awr.print(f"\n[bold red]❌ Reading locks failed:[/bold red] {e}")
            raise typer.Exit(code=1)
