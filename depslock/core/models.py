# depslock/core/models.py

"""
Core models for depslock.

This module contains the mapping types exchanged with the lock file codecs,
the scope variants understood by the root guard and the typed view of the
project configuration file.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    Field,
    ConfigDict,
)

# ==============================================================
# LOCK MAPPINGS
# ==============================================================

# Configuration name -> dependency coordinates it requires
ConfigurationDependencies = Dict[str, List[str]]

# Dependency coordinate -> sorted names of configurations requiring it
ModuleConfigurations = Dict[str, List[str]]

# ==============================================================
# GUARD SCOPES
# ==============================================================

class ProjectScope(BaseModel):
    """Operations on the unified lock file, reported against the project."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["project"] = "project"

class ConfigurationScope(BaseModel):
    """Operations on one legacy lock file, reported against its configuration."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["configuration"] = "configuration"
    configuration: str = Field(..., min_length=1, description="Configuration name")

LockScope = Union[ProjectScope, ConfigurationScope]

# ==============================================================
# PROJECT SETTINGS
# ==============================================================

class LockingSettings(BaseModel):
    """Settings read from .depslock/config.yaml."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    lockfile: Optional[str] = Field(
        default=None,
        description="Custom location of the unified lock file, relative to the project directory"
    )
    project_path: str = Field(
        default=":",
        alias="project-path",
        description="Identity path of the project, used in error messages"
    )
