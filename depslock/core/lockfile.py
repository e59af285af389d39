# depslock/core/lockfile.py

"""
Lock file persistence for dependency locking.

LockFileReaderWriter is the single entry point: it validates that lock file
locations can be resolved, then delegates to the unified codec (one file for
all configurations) or the legacy codec (one file per configuration).
"""

from pathlib import Path
from typing import Iterable, List, Mapping, Optional

from depslock.core.console import Console, ConsoleAware
from depslock.core.legacy_lockfile import LegacyLockFileCodec
from depslock.core.models import ConfigurationDependencies, ConfigurationScope, ProjectScope
from depslock.core.resolver import DomainContext, FileResolver, lockfile_prefix
from depslock.core.root_guard import RootGuard
from depslock.core.unique_lockfile import UniqueLockFileCodec

# ==============================================================
# LOCKFILE READER/WRITER
# ==============================================================

class LockFileReaderWriter(ConsoleAware):
    """Reads and writes lock files for a project or a build script."""

    def __init__(
        self,
        resolver: FileResolver,
        context: DomainContext,
        lock_file: Optional[Path] = None,
        console: Optional[Console] = None,
        verbose: bool = False
    ):
        super().__init__(console, verbose)
        self.resolver = resolver
        self.context = context
        self.prefix: str = lockfile_prefix(context)
        self.guard = RootGuard(resolver, context)
        self.unique = UniqueLockFileCodec(resolver, self.prefix, lock_file, console, verbose)
        self.legacy = LegacyLockFileCodec(resolver, self.prefix, console, verbose)

    def can_write(self) -> bool:
        return self.resolver.can_resolve_relative_path()

    # ----------------------------------------------------------
    # Unified lock file
    # ----------------------------------------------------------

    def unique_lockfile_path(self) -> Path:
        self.guard.ensure_resolvable(ProjectScope())
        return self.unique.lockfile_path()

    def write_unique_lockfile(self, dependencies: Mapping[str, Iterable[str]]) -> Path:
        """
        Write the unified lock file.

        Args:
            dependencies: Configuration name to the coordinates it requires

        Returns:
            Location of the written file

        Raises:
            RootUnresolvableError: If the project directory cannot be determined
        """
        self.guard.ensure_resolvable(ProjectScope())
        return self.unique.write(dependencies)

    def read_unique_lockfile(self) -> ConfigurationDependencies:
        """Read the unified lock file; empty when no file exists."""
        self.guard.ensure_resolvable(ProjectScope())
        return self.unique.read()

    # ----------------------------------------------------------
    # Per-configuration lock files
    # ----------------------------------------------------------

    def legacy_lockfile_path(self, configuration: str) -> Path:
        self.guard.ensure_resolvable(ConfigurationScope(configuration=configuration))
        return self.legacy.lockfile_path(configuration)

    def write_lockfile(self, configuration: str, lines: Iterable[str]) -> Path:
        """Write the lock file of one configuration, keeping the order of ``lines``."""
        self.guard.ensure_resolvable(ConfigurationScope(configuration=configuration))
        return self.legacy.write(configuration, lines)

    def read_lockfile(self, configuration: str) -> List[str]:
        """Read the lock file of one configuration; empty when no file exists."""
        self.guard.ensure_resolvable(ConfigurationScope(configuration=configuration))
        return self.legacy.read(configuration)

    def delete_legacy_lockfile(self, configuration: str) -> bool:
        self.guard.ensure_resolvable(ConfigurationScope(configuration=configuration))
        return self.legacy.delete(configuration)

    def read_all_legacy_lockfiles(self) -> ConfigurationDependencies:
        self.guard.ensure_resolvable(ProjectScope())
        return self.legacy.read_all()

    def migrate_legacy_lockfiles(self) -> ConfigurationDependencies:
        """
        Move every per-configuration lock file of this scope into the unified lock file.

        Locks already in the unified file are kept; a configuration present in
        both takes its legacy locks. The legacy files are deleted afterwards,
        and the locking directory too once nothing else is left in it.

        Returns:
            The migrated locks, empty when there was nothing to migrate
        """
        self.guard.ensure_resolvable(ProjectScope())

        dependencies = self.legacy.read_all()
        if not dependencies:
            self.log("No legacy lock files to migrate")
            return {}

        merged = self.unique.read()
        merged.update(dependencies)
        path = self.unique.write(merged)
        for configuration in dependencies:
            self.legacy.delete(configuration)

        locking_dir = self.legacy.locking_dir()
        if locking_dir.is_dir() and not any(locking_dir.iterdir()):
            locking_dir.rmdir()
            self.log(f"Removed empty locking directory {locking_dir}")

        self.log(f"Migrated {len(dependencies)} legacy lock files into {path}")
        return dependencies
