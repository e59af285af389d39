# depslock/core/config.py

"""
Configuration options management for depslock.

This module handles reading and writing the per-project configuration stored
in .depslock/config.yaml
"""

from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from pydantic import ValidationError

from depslock.core.constants import CONFIG_FILE
from depslock.core.exceptions import ConfigLoadError
from depslock.core.models import LockingSettings

# ==============================================================
# PROJECT CONFIGURATION MANAGER CLASS
# ==============================================================

class ProjectConfig:
    """Manages configuration settings and file operations for a project."""
    
    def __init__(self, project_path: Path):
        self.project_path = Path(project_path)
        self.config_file = self.project_path / CONFIG_FILE
        self._data: Optional[Dict[str, Any]] = None
    
    def load(self) -> Dict[str, Any]:
        """Load config data and cache it."""
        if not self.config_file.exists():
            self._data = {}
            return self._data
        
        try:
            data = yaml.safe_load(self.config_file.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigLoadError(str(self.config_file), str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigLoadError(str(self.config_file), "expected a mapping at the top level")
        self._data = data
        return self._data
    
    def save(self) -> None:
        """Save cached data to config file."""
        if self._data is None:
            return
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        content = yaml.dump(self._data, default_flow_style=False, sort_keys=False)
        self.config_file.write_text(content, encoding="utf-8")
    
    def save_if_changed(self, key: str, value: Any) -> None:
        """Save config if key/value has changed."""
        data = self._loaded()
        if data.get(key) != value:
            data[key] = value
            self.save()
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get a specific setting value."""
        return self._loaded().get(key, default)

    def locking_settings(self) -> LockingSettings:
        """Typed view of the settings relevant to lock file placement."""
        try:
            return LockingSettings.model_validate(self._loaded())
        except ValidationError as e:
            raise ConfigLoadError(str(self.config_file), str(e)) from e

    def _loaded(self) -> Dict[str, Any]:
        if self._data is None:
            self.load()
        return self._data # type: ignore
