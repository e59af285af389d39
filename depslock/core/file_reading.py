# depslock/core/file_reading.py

"""
Text helpers shared by the unified and legacy lock file codecs.

Every lock file starts with the fixed header; readers drop comment lines and
blank lines wherever they appear.
"""

from pathlib import Path
from typing import Iterable, List

from depslock.core.constants import COMMENT_PREFIX, LOCKFILE_HEADER_LIST


def read_lock_lines(path: Path) -> List[str]:
    """
    Read the content lines of a lock file.

    Args:
        path: Lock file location

    Returns:
        Lines in file order, without comments, blank lines or line endings.
        An empty list when the file does not exist.
    """
    if not path.is_file():
        return []

    # utf-8-sig tolerates a BOM added by editors; universal newlines
    # turn \r\n and \r into \n, the only separator split on
    text = path.read_text(encoding="utf-8-sig")
    return [
        line for line in text.split("\n")
        if line.strip() and not line.startswith(COMMENT_PREFIX)
    ]


def write_lock_lines(path: Path, lines: Iterable[str]) -> None:
    """Overwrite ``path`` with the header followed by ``lines``, one per line."""
    content = "".join(f"{line}\n" for line in [*LOCKFILE_HEADER_LIST, *lines])
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
