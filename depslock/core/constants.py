from pathlib import Path

# ==============================================================
# CONSTANTS
# ==============================================================
DEPENDENCY_LOCKING_FOLDER = Path("depslock/dependency-locks")
UNIQUE_LOCKFILE_NAME = "depslock.lockfile"
FILE_SUFFIX = ".lockfile"
BUILD_SCRIPT_PREFIX = "buildscript-"

# Key grouping every configuration that locks zero dependencies
EMPTY_CONFIGURATIONS_ENTRY = "empty"

COMMENT_PREFIX = "#"
LOCKFILE_HEADER_LIST = [
    "# This is a depslock generated file for dependency locking.",
    "# Manual edits can break the build and are not advised.",
    "# This file is expected to be part of source control.",
]

CONFIG_FILE = Path(".depslock/config.yaml")
