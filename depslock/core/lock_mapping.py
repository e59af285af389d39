# depslock/core/lock_mapping.py

"""
Conversions between the two views of a lock state.

In memory, callers work configuration-centric: each configuration lists the
coordinates it requires. The unified lock file is module-centric: each
coordinate lists the configurations requiring it, and configurations with no
dependencies are collected under a single "empty" entry.
"""

from typing import Dict, Iterable, List, Mapping, Set

from depslock.core.constants import EMPTY_CONFIGURATIONS_ENTRY
from depslock.core.models import ConfigurationDependencies, ModuleConfigurations


def to_module_configurations(
    dependencies: Mapping[str, Iterable[str]]
) -> ModuleConfigurations:
    """
    Invert a configuration -> coordinates mapping.

    The result is ordered for writing: coordinates sorted lexicographically,
    the "empty" entry last, and every configuration list sorted.

    Args:
        dependencies: Configuration name to the coordinates it requires

    Returns:
        Coordinate to sorted configuration names
    """
    modules: Dict[str, Set[str]] = {}
    empty: Set[str] = set()

    for configuration, coordinates in dependencies.items():
        coordinates = list(coordinates)
        if not coordinates:
            empty.add(configuration)
            continue
        for coordinate in coordinates:
            modules.setdefault(coordinate, set()).add(configuration)

    result: ModuleConfigurations = {
        coordinate: sorted(modules[coordinate]) for coordinate in sorted(modules)
    }
    if empty:
        result[EMPTY_CONFIGURATIONS_ENTRY] = sorted(empty)
    return result


def to_configuration_dependencies(
    modules: Mapping[str, Iterable[str]]
) -> ConfigurationDependencies:
    """
    Invert a coordinate -> configurations mapping read from a unified lock file.

    Configurations listed under "empty" get an empty coordinate list unless
    another entry already gave them coordinates. Coordinate lists are sorted.
    """
    collected: Dict[str, Set[str]] = {}

    for module, configurations in modules.items():
        for configuration in configurations:
            coordinates = collected.setdefault(configuration, set())
            if module != EMPTY_CONFIGURATIONS_ENTRY:
                coordinates.add(module)

    return {
        configuration: sorted(coordinates)
        for configuration, coordinates in collected.items()
    }


def format_unique_lines(modules: ModuleConfigurations) -> List[str]:
    """Render entries as ``coordinate=confA,confB`` lines, in mapping order."""
    return [f"{module}={','.join(configurations)}" for module, configurations in modules.items()]


def parse_unique_lines(lines: Iterable[str]) -> ModuleConfigurations:
    """
    Parse ``coordinate=confA,confB`` content lines.

    A line without '=' (or with nothing after it) is kept as a key with no
    configurations rather than rejected.
    """
    modules: ModuleConfigurations = {}
    for line in lines:
        key, _, value = line.strip().partition("=")
        if not key:
            continue
        configurations = [c.strip() for c in value.split(",") if c.strip()]
        modules.setdefault(key, []).extend(configurations)
    return modules
