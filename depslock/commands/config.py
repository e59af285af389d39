# depslock/commands/config.py

"""
depslock config command — manage per-project locking settings.

Settings live in .depslock/config.yaml inside the project directory.
"""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from depslock.core.config import ProjectConfig
from depslock.core.console import ConsoleAware
from depslock.core.exceptions import DepsLockError

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def config_command(
    project_dir: Optional[Path],
    lock_file: Optional[str],
    project_path: Optional[str],
    console_awr: ConsoleAware
):
    """Command wrapper for config command."""

    if project_dir is None:
        project_dir = Path.cwd()
    else:
        project_dir = Path(project_dir).resolve()

    config = ProjectConfig(project_dir)

    if lock_file:
        config.save_if_changed("lockfile", lock_file)
        console_awr.print(f"🔧 [green]Lock file location set[/green] → [cyan]{lock_file}[/cyan]")
    if project_path:
        config.save_if_changed("project-path", project_path)
        console_awr.print(f"🔧 [green]Project path set[/green] → [cyan]{project_path}[/cyan]")

    settings = config.locking_settings()
    console_awr.print("📋 [bold cyan]Configuration in use:[/]")
    console_awr.print(f"  lockfile:      {settings.lockfile or '[dim]default[/]'}")
    console_awr.print(f"  project-path:  {settings.project_path}")

def register(app):
    """Register the config command with the Typer app."""

    @app.command()
    def config(
        project_dir: Optional[Path] = typer.Option(
            None,
            "--project-dir",
            "-d",
            help="Project directory (default: current directory)"
        ),
        lock_file: Optional[str] = typer.Option(
            None,
            "--lockfile",
            help="Set a custom unified lock file location, relative to the project directory"
        ),
        project_path: Optional[str] = typer.Option(
            None,
            "--project-path",
            help="Set the project identity path (e.g. ':app')"
        )
    ):
        """
        Manage depslock configuration settings.
        """
        console = Console(log_path=False)
        console_awr = ConsoleAware(console=console, verbose=False)

        try:
            config_command(project_dir, lock_file, project_path, console_awr)

        except DepsLockError as e:
            console_awr.print(f"\n[bold red]❌ Config setting failed:[/bold red] {e}")
            raise typer.Exit(code=1)
