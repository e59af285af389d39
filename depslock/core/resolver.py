# depslock/core/resolver.py

"""
Collaborators consulted by the lock file reader/writer.

The build tool normally supplies its own path resolver and project context;
the protocols below describe what depslock needs from them. ProjectDirResolver
and ProjectContext are the defaults used by the CLI.
"""

from pathlib import Path
from typing import Optional, Protocol, Union

from depslock.core.constants import BUILD_SCRIPT_PREFIX
from depslock.core.exceptions import PathResolutionError

ROOT_PATH = ":"
PATH_SEPARATOR = ":"

# ==============================================================
# PROTOCOLS
# ==============================================================

class FileResolver(Protocol):
    """Turns logical names into physical locations."""
    def can_resolve_relative_path(self) -> bool:
        ...

    def resolve(self, name: Union[str, Path]) -> Path:
        ...

class DomainContext(Protocol):
    """Identity and scope of the project or build script being locked."""
    def identity_path(self, name: str) -> str:
        ...

    def get_project_path(self) -> str:
        ...

    def is_script(self) -> bool:
        ...

def lockfile_prefix(context: DomainContext) -> str:
    """Filename prefix for lock files written in the given context."""
    return BUILD_SCRIPT_PREFIX if context.is_script() else ""

# ==============================================================
# DEFAULT IMPLEMENTATIONS
# ==============================================================

class ProjectDirResolver:
    """Resolves names against a project directory, when one is known."""

    def __init__(self, project_dir: Optional[Union[str, Path]]):
        self.project_dir: Optional[Path] = Path(project_dir) if project_dir is not None else None

    def can_resolve_relative_path(self) -> bool:
        return self.project_dir is not None

    def resolve(self, name: Union[str, Path]) -> Path:
        path = Path(name)
        if path.is_absolute():
            return path
        if self.project_dir is None:
            raise PathResolutionError(str(name))
        return self.project_dir / path

class ProjectContext:
    """Project identity using ':'-separated build paths (':' is the root project)."""

    def __init__(self, project_path: str = ROOT_PATH, script: bool = False):
        self.project_path = project_path or ROOT_PATH
        self.script = script

    def get_project_path(self) -> str:
        return self.project_path

    def identity_path(self, name: str) -> str:
        if self.project_path == ROOT_PATH:
            return f"{ROOT_PATH}{name}"
        return f"{self.project_path}{PATH_SEPARATOR}{name}"

    def is_script(self) -> bool:
        return self.script
