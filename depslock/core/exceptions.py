# depslock/core/exceptions.py

"""
depslock domain-specific exceptions.

Library code raises these; the CLI commands catch DepsLockError and turn it
into a formatted message and a non-zero exit code.
"""

class DepsLockError(Exception):
    """Base exception for all depslock errors."""
    pass

class InvalidUsageError(DepsLockError):
    """Raised when a command receives arguments it cannot act on."""
    pass

# ==============================================================
# LOCKING ERRORS
# ==============================================================

class LockingError(DepsLockError):
    """Base exception for lock file persistence errors."""
    pass

class RootUnresolvableError(LockingError):
    """Raised when lock files cannot be located because relative paths are unresolvable."""
    def __init__(self, entity_kind: str, path: str):
        self.entity_kind = entity_kind
        self.path = path
        super().__init__(
            f"Dependency locking cannot be used for {entity_kind} '{path}'. "
            f"Lock files live relative to the project directory, which could not be determined."
        )

class PathResolutionError(LockingError):
    """Raised when a relative path is resolved without a root directory."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Cannot resolve relative path '{name}': no project directory is set")

# ==============================================================
# CONFIGURATION ERRORS
# ==============================================================

class ConfigLoadError(DepsLockError):
    """Raised when .depslock/config.yaml exists but cannot be used."""
    def __init__(self, path: str, details: str):
        self.path = path
        self.details = details
        super().__init__(f"Cannot load configuration file {path}: {details}")
