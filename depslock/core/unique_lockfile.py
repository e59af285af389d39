# depslock/core/unique_lockfile.py

from pathlib import Path
from typing import Iterable, Mapping, Optional

from depslock.core.console import Console, ConsoleAware
from depslock.core.constants import UNIQUE_LOCKFILE_NAME
from depslock.core.file_reading import read_lock_lines, write_lock_lines
from depslock.core.lock_mapping import (
    format_unique_lines,
    parse_unique_lines,
    to_configuration_dependencies,
    to_module_configurations,
)
from depslock.core.models import ConfigurationDependencies
from depslock.core.resolver import FileResolver

# ==============================================================
# UNIFIED LOCK FILE
# ==============================================================

class UniqueLockFileCodec(ConsoleAware):
    """Reads and writes the single lock file covering every configuration."""

    def __init__(
        self,
        resolver: FileResolver,
        prefix: str = "",
        lock_file: Optional[Path] = None,
        console: Optional[Console] = None,
        verbose: bool = False
    ):
        super().__init__(console, verbose)
        self.resolver = resolver
        self.prefix = prefix
        self.lock_file: Optional[Path] = Path(lock_file) if lock_file is not None else None

    def lockfile_path(self) -> Path:
        """Custom location if one was set, otherwise the (prefixed) default name."""
        if self.lock_file is not None:
            return self.lock_file
        return self.resolver.resolve(f"{self.prefix}{UNIQUE_LOCKFILE_NAME}")

    def write(self, dependencies: Mapping[str, Iterable[str]]) -> Path:
        path = self.lockfile_path()
        modules = to_module_configurations(dependencies)
        write_lock_lines(path, format_unique_lines(modules))
        self.log(f"Wrote {len(modules)} lock entries to {path}")
        return path

    def read(self) -> ConfigurationDependencies:
        path = self.lockfile_path()
        if not path.is_file():
            self.log(f"No lock file at {path}")
            return {}

        dependencies = to_configuration_dependencies(parse_unique_lines(read_lock_lines(path)))
        self.log(f"Read locks for {len(dependencies)} configurations from {path}")
        return dependencies
