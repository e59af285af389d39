# depslock/commands/write.py

"""
depslock write command — record locked dependencies.

Each argument assigns coordinates to a configuration:
``compileClasspath=org:lib:1.0,org:other:2.1``. A configuration with nothing
after '=' is locked with no dependencies.
"""
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import typer
from rich.console import Console

from depslock.core.console import ConsoleAware
from depslock.core.exceptions import DepsLockError, InvalidUsageError
from depslock.core.project_locking import create_reader_writer

# ==============================================================
# ARGUMENT PARSING
# ==============================================================

def parse_assignment(assignment: str) -> Tuple[str, List[str]]:
    """Split ``conf=a,b`` into the configuration name and its coordinates."""
    configuration, _, coordinates = assignment.partition("=")
    configuration = configuration.strip()
    if not configuration:
        raise InvalidUsageError(f"Missing configuration name in '{assignment}'")
    return configuration, [c.strip() for c in coordinates.split(",") if c.strip()]

def parse_assignments(assignments: List[str]) -> Dict[str, List[str]]:
    dependencies: Dict[str, List[str]] = {}
    for assignment in assignments:
        configuration, coordinates = parse_assignment(assignment)
        if configuration in dependencies:
            raise InvalidUsageError(f"Configuration '{configuration}' given more than once")
        dependencies[configuration] = coordinates
    return dependencies

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def write_command(
    project_dir: Optional[Path],
    assignments: List[str],
    lock_file: Optional[Path],
    buildscript: bool,
    legacy: bool,
    console_awr: ConsoleAware
):
    """Command wrapper for write command."""
    dependencies = parse_assignments(assignments)
    lockfiles = create_reader_writer(
        project_dir, lock_file, buildscript, console_awr.console, console_awr.verbose
    )

    if legacy:
        for configuration, coordinates in dependencies.items():
            path = lockfiles.write_lockfile(configuration, coordinates)
            console_awr.print(
                f"🔒 [green]Locked {len(coordinates)} dependencies for[/green] "
                f"[bold]{configuration}[/bold] → [cyan]{path}[/cyan]"
            )
        return

    path = lockfiles.write_unique_lockfile(dependencies)
    console_awr.print(
        f"🔒 [green]Locked {len(dependencies)} configurations[/green] → [cyan]{path}[/cyan]"
    )

def register(app):
    """Register the write command with the Typer app."""

    @app.command()
    def write(
        assignments: List[str] = typer.Argument(
            ...,
            help="Locks as CONFIGURATION=COORDINATE[,COORDINATE...]"
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
            help="Lock build script dependencies instead of project dependencies"
        ),
        legacy: bool = typer.Option(
            False,
            "--legacy",
            help="Write one lock file per configuration"
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            help="Show detailed output"
        )
    ):
        """Write dependency lock files."""
        console = Console(log_path=False)
        console_awr = ConsoleAware(console=console, verbose=verbose)

        try:
            write_command(project_dir, assignments, lock_file, buildscript, legacy, console_awr)

        except KeyboardInterrupt:
            console_awr.print("\n[bold yellow]⚠️  Write cancelled by user.[/bold yellow]")
            raise typer.Exit(code=1)

        except DepsLockError as e:
            console_awr.print(f"\n[bold red]❌ Locking failed:[/bold red] {e}")
            raise typer.Exit(code=1)
