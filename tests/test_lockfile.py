# tests/test_lockfile.py

"""Tests for LockFileReaderWriter: unified and per-configuration lock files."""

from pathlib import Path

import pytest

from depslock.core.constants import UNIQUE_LOCKFILE_NAME
from depslock.core.exceptions import RootUnresolvableError
from depslock.core.lockfile import LockFileReaderWriter

from conftest import RecordingContext, StubResolver, with_header

# --------------------------------------------------------------------------- #
# Unified lock file
# --------------------------------------------------------------------------- #

def test_writes_a_unique_lock_file(tmp_path: Path, lock_dir: Path, reader_writer):
    lock_dir.rmdir()

    reader_writer.write_unique_lockfile({"a": ["foo", "bar"], "b": ["foo"], "c": []})

    assert (tmp_path / UNIQUE_LOCKFILE_NAME).read_text(encoding="utf-8") == with_header(
        "bar=a\nfoo=a,b\nempty=c\n"
    )
    assert not lock_dir.exists()


def test_writes_dependencies_and_configurations_sorted(tmp_path: Path, reader_writer):
    reader_writer.write_unique_lockfile({
        "b": ["foo", "bar"], "d": ["bar", "foobar"], "a": ["foo"], "e": [], "f": [], "c": [],
    })

    assert (tmp_path / UNIQUE_LOCKFILE_NAME).read_text(encoding="utf-8") == with_header(
        "bar=b,d\nfoo=a,b\nfoobar=d\nempty=c,e,f\n"
    )


def test_writing_twice_in_different_order_gives_identical_bytes(tmp_path: Path, reader_writer):
    path = tmp_path / UNIQUE_LOCKFILE_NAME

    reader_writer.write_unique_lockfile({"a": ["x", "y"], "b": ["y"], "c": []})
    first = path.read_bytes()
    reader_writer.write_unique_lockfile({"c": [], "b": ["y"], "a": ["y", "x"]})

    assert path.read_bytes() == first


def test_writes_a_unique_lock_file_to_a_custom_location(
    tmp_path: Path, lock_dir: Path, resolver, context
):
    lock_dir.rmdir()
    custom = tmp_path / "different" / "lock.file"
    reader_writer = LockFileReaderWriter(resolver, context, custom)

    path = reader_writer.write_unique_lockfile({"a": ["foo", "bar"], "b": ["foo"], "c": []})

    assert path == custom
    assert custom.read_text(encoding="utf-8") == with_header("bar=a\nfoo=a,b\nempty=c\n")
    assert not (tmp_path / UNIQUE_LOCKFILE_NAME).exists()
    assert not lock_dir.exists()


def test_reads_a_unique_lock_file(tmp_path: Path, reader_writer):
    (tmp_path / "depslock.lockfile").write_text(
        "#ignored\nbar=a,c\nfoo=a,b,c\nempty=d\n", encoding="utf-8"
    )

    result = reader_writer.read_unique_lockfile()

    assert result == {"a": ["bar", "foo"], "b": ["foo"], "c": ["bar", "foo"], "d": []}


def test_reads_a_unique_lock_file_from_a_custom_location(tmp_path: Path, resolver, context):
    custom = tmp_path / "custom" / "lock.file"
    custom.parent.mkdir()
    custom.write_text("#ignored\nbar=a,c\nfoo=a,b,c\nempty=d\n", encoding="utf-8")
    reader_writer = LockFileReaderWriter(resolver, context, custom)

    result = reader_writer.read_unique_lockfile()

    assert result == {"a": ["bar", "foo"], "b": ["foo"], "c": ["bar", "foo"], "d": []}


def test_reading_orders_coordinates_regardless_of_file_order(tmp_path: Path, reader_writer):
    (tmp_path / UNIQUE_LOCKFILE_NAME).write_text("zed=a\n\nalpha=a\n", encoding="utf-8")

    assert reader_writer.read_unique_lockfile() == {"a": ["alpha", "zed"]}


def test_reading_a_missing_unique_lock_file_returns_nothing(reader_writer):
    assert reader_writer.read_unique_lockfile() == {}


def test_unique_lock_file_round_trip(reader_writer):
    locks = {"compile": ["org:b:1.0", "org:a:1.0"], "runtime": ["org:a:1.0"], "test": []}

    reader_writer.write_unique_lockfile(locks)

    assert reader_writer.read_unique_lockfile() == {
        "compile": ["org:a:1.0", "org:b:1.0"],
        "runtime": ["org:a:1.0"],
        "test": [],
    }


def test_writes_a_unique_lock_file_with_prefix(tmp_path: Path, script_reader_writer):
    script_reader_writer.write_unique_lockfile({"a": ["foo", "bar"], "b": ["foo"], "c": []})

    assert (tmp_path / f"buildscript-{UNIQUE_LOCKFILE_NAME}").read_text(
        encoding="utf-8"
    ) == with_header("bar=a\nfoo=a,b\nempty=c\n")
    assert not (tmp_path / UNIQUE_LOCKFILE_NAME).exists()


def test_reads_a_unique_lock_file_with_prefix(tmp_path: Path, script_reader_writer):
    (tmp_path / "buildscript-depslock.lockfile").write_text(
        "#ignored\nbar=a,c\nfoo=a,b,c\nempty=d\n", encoding="utf-8"
    )

    result = script_reader_writer.read_unique_lockfile()

    assert result == {"a": ["bar", "foo"], "b": ["foo"], "c": ["bar", "foo"], "d": []}

# --------------------------------------------------------------------------- #
# Per-configuration lock files
# --------------------------------------------------------------------------- #

def test_writes_a_legacy_lock_file(lock_dir: Path, reader_writer):
    reader_writer.write_lockfile("conf", ["line1", "line2"])

    assert (lock_dir / "conf.lockfile").read_text(encoding="utf-8") == with_header(
        "line1\nline2\n"
    )


def test_legacy_lock_file_keeps_caller_order_and_duplicates(lock_dir: Path, reader_writer):
    lines = ["org:z:1.0", "org:a:1.0", "org:z:1.0"]

    reader_writer.write_lockfile("conf", lines)

    assert reader_writer.read_lockfile("conf") == lines


def test_writing_a_legacy_lock_file_creates_the_locking_directory(
    tmp_path: Path, lock_dir: Path, reader_writer
):
    lock_dir.rmdir()

    path = reader_writer.write_lockfile("conf", ["line1"])

    assert path == lock_dir / "conf.lockfile"
    assert path.is_file()


def test_reads_a_legacy_lock_file(lock_dir: Path, reader_writer):
    (lock_dir / "conf.lockfile").write_text("#Ignored\nline1\n\nline2", encoding="utf-8")

    assert reader_writer.read_lockfile("conf") == ["line1", "line2"]


def test_reading_ignores_comments_anywhere(lock_dir: Path, reader_writer):
    (lock_dir / "conf.lockfile").write_text(
        "line1\n# middle comment\n   \nline2\n#trailing\n", encoding="utf-8"
    )

    assert reader_writer.read_lockfile("conf") == ["line1", "line2"]


def test_reading_a_missing_legacy_lock_file_returns_nothing(reader_writer):
    assert reader_writer.read_lockfile("conf") == []


def test_writes_a_legacy_lock_file_with_prefix(lock_dir: Path, script_reader_writer):
    script_reader_writer.write_lockfile("conf", ["line1", "line2"])

    assert (lock_dir / "buildscript-conf.lockfile").read_text(encoding="utf-8") == with_header(
        "line1\nline2\n"
    )
    assert not (lock_dir / "conf.lockfile").exists()


def test_reads_a_legacy_lock_file_with_prefix(lock_dir: Path, script_reader_writer):
    (lock_dir / "buildscript-conf.lockfile").write_text(
        "#Ignored\nline1\n\nline2", encoding="utf-8"
    )

    assert script_reader_writer.read_lockfile("conf") == ["line1", "line2"]

# --------------------------------------------------------------------------- #
# Unresolvable root
# --------------------------------------------------------------------------- #

@pytest.fixture
def unresolvable(tmp_path: Path):
    context = RecordingContext(project_path="foo")
    return LockFileReaderWriter(StubResolver(tmp_path, resolvable=False), context), context


def test_fails_to_read_a_unique_lockfile_if_root_could_not_be_determined(unresolvable):
    reader_writer, context = unresolvable

    with pytest.raises(RootUnresolvableError) as exc:
        reader_writer.read_unique_lockfile()

    assert "Dependency locking cannot be used for project" in str(exc.value)
    assert "foo" in str(exc.value)
    assert exc.value.entity_kind == "project"
    assert context.calls == [("get_project_path",)]


def test_fails_to_write_a_unique_lockfile_if_root_could_not_be_determined(
    tmp_path: Path, unresolvable
):
    reader_writer, context = unresolvable

    with pytest.raises(RootUnresolvableError) as exc:
        reader_writer.write_unique_lockfile({"foo": ["a:b:1.0"]})

    assert "Dependency locking cannot be used for project" in str(exc.value)
    assert "foo" in str(exc.value)
    assert context.calls == [("get_project_path",)]
    assert list(tmp_path.iterdir()) == []


def test_fails_to_read_a_legacy_lockfile_if_root_could_not_be_determined(unresolvable):
    reader_writer, context = unresolvable

    with pytest.raises(RootUnresolvableError) as exc:
        reader_writer.read_lockfile("bar")

    assert "Dependency locking cannot be used for configuration" in str(exc.value)
    assert "bar" in str(exc.value)
    assert exc.value.entity_kind == "configuration"
    assert context.calls == [("identity_path", "bar")]


def test_fails_to_write_a_legacy_lockfile_if_root_could_not_be_determined(
    tmp_path: Path, unresolvable
):
    reader_writer, context = unresolvable

    with pytest.raises(RootUnresolvableError) as exc:
        reader_writer.write_lockfile("bar", [])

    assert "Dependency locking cannot be used for configuration" in str(exc.value)
    assert "bar" in str(exc.value)
    assert context.calls == [("identity_path", "bar")]
    assert list(tmp_path.iterdir()) == []


def test_can_write_follows_the_resolver(reader_writer, unresolvable):
    assert reader_writer.can_write()
    assert not unresolvable[0].can_write()


def test_legacy_lines_with_unicode_separators_round_trip(reader_writer):
    lines = ["org:a:1.0\x85beta", "org:b:1.0\u2028gamma", "org:c:1.0\x0cdelta"]

    reader_writer.write_lockfile("conf", lines)

    assert reader_writer.read_lockfile("conf") == lines


def test_reads_windows_line_endings(lock_dir: Path, reader_writer):
    (lock_dir / "conf.lockfile").write_bytes(b"#Ignored\r\nline1\r\n\r\nline2\r\n")

    assert reader_writer.read_lockfile("conf") == ["line1", "line2"]
