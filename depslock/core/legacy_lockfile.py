# depslock/core/legacy_lockfile.py

from pathlib import Path
from typing import Iterable, List, Optional

from depslock.core.console import Console, ConsoleAware
from depslock.core.constants import BUILD_SCRIPT_PREFIX, DEPENDENCY_LOCKING_FOLDER, FILE_SUFFIX
from depslock.core.file_reading import read_lock_lines, write_lock_lines
from depslock.core.models import ConfigurationDependencies
from depslock.core.resolver import FileResolver

# ==============================================================
# PER-CONFIGURATION LOCK FILES
# ==============================================================

class LegacyLockFileCodec(ConsoleAware):
    """Reads and writes one lock file per configuration in the locking directory.

    Lines are stored exactly as given: no sorting, no deduplication.
    """

    def __init__(
        self,
        resolver: FileResolver,
        prefix: str = "",
        console: Optional[Console] = None,
        verbose: bool = False
    ):
        super().__init__(console, verbose)
        self.resolver = resolver
        self.prefix = prefix

    def locking_dir(self) -> Path:
        return self.resolver.resolve(DEPENDENCY_LOCKING_FOLDER)

    def lockfile_path(self, configuration: str) -> Path:
        return self.locking_dir() / f"{self.prefix}{configuration}{FILE_SUFFIX}"

    def write(self, configuration: str, lines: Iterable[str]) -> Path:
        lines = list(lines)
        path = self.lockfile_path(configuration)
        write_lock_lines(path, lines)
        self.log(f"Wrote {len(lines)} locked dependencies for '{configuration}' to {path}")
        return path

    def read(self, configuration: str) -> List[str]:
        path = self.lockfile_path(configuration)
        lines = read_lock_lines(path)
        self.log(f"Read {len(lines)} locked dependencies for '{configuration}' from {path}")
        return lines

    def configurations(self) -> List[str]:
        """Names of the configurations with a lock file in this scope, sorted."""
        locking_dir = self.locking_dir()
        if not locking_dir.is_dir():
            return []

        names = []
        for path in locking_dir.glob(f"*{FILE_SUFFIX}"):
            if not path.is_file():
                continue
            name = path.name[:-len(FILE_SUFFIX)]
            if self.prefix:
                if not name.startswith(self.prefix):
                    continue
                name = name[len(self.prefix):]
            elif name.startswith(BUILD_SCRIPT_PREFIX):
                continue
            if name:
                names.append(name)
        return sorted(names)

    def read_all(self) -> ConfigurationDependencies:
        return {configuration: self.read(configuration) for configuration in self.configurations()}

    def delete(self, configuration: str) -> bool:
        path = self.lockfile_path(configuration)
        if not path.is_file():
            return False
        path.unlink()
        self.log(f"Deleted {path}")
        return True
