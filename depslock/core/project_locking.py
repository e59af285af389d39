# depslock/core/project_locking.py

from pathlib import Path
from typing import Optional

from depslock.core.config import ProjectConfig
from depslock.core.console import Console
from depslock.core.lockfile import LockFileReaderWriter
from depslock.core.resolver import ProjectContext, ProjectDirResolver


def create_reader_writer(
    project_dir: Optional[Path],
    lock_file: Optional[Path] = None,
    buildscript: bool = False,
    console: Optional[Console] = None,
    verbose: bool = False
) -> LockFileReaderWriter:
    """
    Build a LockFileReaderWriter for a project directory.

    Args:
        project_dir: Project root; current directory when None
        lock_file: Custom unified lock file location, relative to the project
            directory unless absolute. Takes precedence over
            the ``lockfile`` key of .depslock/config.yaml
        buildscript: Lock the build script's dependencies instead of the project's
        console: Optional console for progress output
        verbose: Emit detailed log output

    Returns:
        Reader/writer bound to the project directory
    """
    project_path = Path(project_dir).resolve() if project_dir is not None else Path.cwd()
    settings = ProjectConfig(project_path).locking_settings()

    resolver = ProjectDirResolver(project_path)
    if lock_file is not None:
        lock_file = resolver.resolve(lock_file)
    elif settings.lockfile:
        lock_file = resolver.resolve(settings.lockfile)

    context = ProjectContext(settings.project_path, script=buildscript)
    return LockFileReaderWriter(resolver, context, lock_file, console=console, verbose=verbose)
