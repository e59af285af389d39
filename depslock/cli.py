# depslock/cli.py
"""
Main CLI entry point for depslock.

This module sets up the Typer application and registers all commands.
"""
import typer
from rich.console import Console

from depslock.commands import (
    config,
    migrate,
    show,
    write,
)

import importlib.metadata
import pathlib
import sys
import tomllib

app = typer.Typer(
    name="depslock",
    help="depslock - read and write dependency lock files",
    add_completion=False,
    no_args_is_help=True,
)

# Register commands
write.register(app)
show.register(app)
migrate.register(app)
config.register(app)

def get_package_version():
    package_name = "depslock"

    try:
        return importlib.metadata.version(package_name)
    except importlib.metadata.PackageNotFoundError:
        pass

    # Source checkout: depslock/cli.py sits one level below pyproject.toml
    pyproject_path = pathlib.Path(__file__).parent.parent / "pyproject.toml"
    if not pyproject_path.exists():
        return "unknown"

    try:
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Warning: Could not read version from pyproject.toml: {e}", file=sys.stderr)
        return "unknown"
    return pyproject_data.get("project", {}).get("version", "unknown")

@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version of depslock and exit.",
        callback=lambda value: _version_callback(value),
        is_eager=True,
    )
):
    """
    depslock CLI.
    """
    pass

def _version_callback(value: bool):
    if value:
        console = Console(log_path=False)
        console.print(f"[bold green]depslock[/] version [cyan]{get_package_version()}[/]")
        raise typer.Exit()

if __name__ == "__main__":
    app()
