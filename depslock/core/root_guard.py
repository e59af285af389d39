# depslock/core/root_guard.py

from depslock.core.exceptions import RootUnresolvableError
from depslock.core.models import ConfigurationScope, LockScope
from depslock.core.resolver import DomainContext, FileResolver


class RootGuard:
    """Refuses lock file access when relative paths cannot be resolved."""

    def __init__(self, resolver: FileResolver, context: DomainContext):
        self.resolver = resolver
        self.context = context

    def ensure_resolvable(self, scope: LockScope) -> None:
        """Raise RootUnresolvableError naming the project or the configuration in scope."""
        if self.resolver.can_resolve_relative_path():
            return

        if isinstance(scope, ConfigurationScope):
            raise RootUnresolvableError(
                "configuration", str(self.context.identity_path(scope.configuration))
            )
        raise RootUnresolvableError("project", str(self.context.get_project_path()))
