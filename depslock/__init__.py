# depslock/__init__.py

from depslock.core.exceptions import (
    DepsLockError,
    LockingError,
    RootUnresolvableError,
)
from depslock.core.lockfile import LockFileReaderWriter
from depslock.core.models import ConfigurationScope, ProjectScope
from depslock.core.resolver import ProjectContext, ProjectDirResolver

__all__ = [
    'DepsLockError',
    'LockingError',
    'RootUnresolvableError',
    'LockFileReaderWriter',
    'ConfigurationScope',
    'ProjectScope',
    'ProjectContext',
    'ProjectDirResolver',
]
