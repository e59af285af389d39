# depslock/commands/migrate.py

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from depslock.core.console import ConsoleAware
from depslock.core.exceptions import DepsLockError
from depslock.core.project_locking import create_reader_writer

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def migrate_command(
    project_dir: Optional[Path],
    lock_file: Optional[Path],
    buildscript: bool,
    console_awr: ConsoleAware
):
    """Command wrapper for migrate command."""
    lockfiles = create_reader_writer(
        project_dir, lock_file, buildscript, console_awr.console, console_awr.verbose
    )

    migrated = lockfiles.migrate_legacy_lockfiles()
    if not migrated:
        console_awr.warn("No per-configuration lock files found, nothing to migrate")
        return

    console_awr.print(
        f"✅ [bold green]Migrated {len(migrated)} configurations[/] → "
        f"[cyan]{lockfiles.unique_lockfile_path()}[/cyan]"
    )

def register(app):
    """Register the migrate command with the Typer app."""

    @app.command()
    def migrate(
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
            help="Migrate build script locks instead of project locks"
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            help="Show detailed output"
        )
    ):
        """Convert per-configuration lock files into the unified lock file."""
        console = Console(log_path=False)
        console_awr = ConsoleAware(console=console, verbose=verbose)

        try:
            migrate_command(project_dir, lock_file, buildscript, console_awr)

        except KeyboardInterrupt:
            console_awr.print("\n[bold yellow]⚠️  Migration cancelled by user.[/bold yellow]")
            raise typer.Exit(code=1)

        except DepsLockError as e:
            console_awr.print(f"\n[bold red]❌ Migration failed:[/bold red] {e}")
            raise typer.Exit(code=1)
