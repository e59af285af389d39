# tests/conftest.py

"""Shared fixtures and collaborator doubles."""

from pathlib import Path
from typing import List, Tuple, Union

import pytest

from depslock.core.constants import DEPENDENCY_LOCKING_FOLDER, LOCKFILE_HEADER_LIST
from depslock.core.lockfile import LockFileReaderWriter


class StubResolver:
    """Resolves every name under a fixed root directory."""

    def __init__(self, root: Path, resolvable: bool = True):
        self.root = root
        self.resolvable = resolvable

    def can_resolve_relative_path(self) -> bool:
        return self.resolvable

    def resolve(self, name: Union[str, Path]) -> Path:
        return self.root / name


class RecordingContext:
    """Context double that records identity lookups."""

    def __init__(self, script: bool = False, project_path: str = "foo"):
        self.script = script
        self.project_path = project_path
        self.calls: List[Tuple[str, ...]] = []

    def identity_path(self, name: str) -> str:
        self.calls.append(("identity_path", name))
        return name

    def get_project_path(self) -> str:
        self.calls.append(("get_project_path",))
        return self.project_path

    def is_script(self) -> bool:
        return self.script


def with_header(body: str) -> str:
    return "\n".join(LOCKFILE_HEADER_LIST) + "\n" + body


@pytest.fixture
def lock_dir(tmp_path: Path) -> Path:
    d = tmp_path / DEPENDENCY_LOCKING_FOLDER
    d.mkdir(parents=True)
    return d


@pytest.fixture
def context() -> RecordingContext:
    return RecordingContext()


@pytest.fixture
def resolver(tmp_path: Path) -> StubResolver:
    return StubResolver(tmp_path)


@pytest.fixture
def reader_writer(resolver: StubResolver, context: RecordingContext) -> LockFileReaderWriter:
    return LockFileReaderWriter(resolver, context)


@pytest.fixture
def script_reader_writer(resolver: StubResolver) -> LockFileReaderWriter:
    return LockFileReaderWriter(resolver, RecordingContext(script=True))
