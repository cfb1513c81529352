"""
phpsolver User Configuration

Hierarchical config with global defaults + local overrides:
- Global: ~/.phpsolver/config.json
- Local: .phpsolver/config.json in the project root

Config structure:
{
  "index": {
    "path": "phpsolver-index.json"   // Snapshot the CLI loads by default
  },
  "logging": {
    "level": "INFO"
  }
}
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional
from phpsolver.logging_config import logger


DEFAULT_CONFIG = {
    "index": {
        "path": "phpsolver-index.json",
    },
    "logging": {
        "level": "INFO",
    },
}


class UserConfig:
    """
    Manages hierarchical user configuration.

    Load order (later overrides earlier):
    1. Default config (hardcoded)
    2. Global config (~/.phpsolver/config.json)
    3. Local config (.phpsolver/config.json)
    """

    def __init__(self, project_root: Optional[Path] = None, home: Optional[Path] = None):
        """
        Initialize config manager.

        Args:
            project_root: Project root directory (defaults to CWD)
            home: Home directory holding the global config (defaults to ~)
        """
        self.project_root = project_root or Path.cwd()
        self.global_config_path = (home or Path.home()) / ".phpsolver" / "config.json"
        self.local_config_path = self.project_root / ".phpsolver" / "config.json"

        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration with hierarchical override.

        Unreadable files are logged and skipped.

        Returns:
            Merged configuration dictionary
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        for path in (self.global_config_path, self.local_config_path):
            if not path.exists():
                continue
            try:
                with open(path, 'r') as f:
                    overrides = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to load config from {path}: {e}")
                continue
            if not isinstance(overrides, dict):
                logger.warning(f"Ignoring config at {path}: top level is not an object")
                continue
            config = self._deep_merge(config, overrides)
            logger.debug(f"Loaded config from {path}")

        return config

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries, with override taking precedence.
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value by dot-separated key.

        Examples:
            config.get("index.path")      # "phpsolver-index.json"
            config.get("logging.level")   # "INFO"
        """
        value = self._config

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_all(self) -> Dict[str, Any]:
        """Get the entire merged configuration."""
        return copy.deepcopy(self._config)

    def reload(self) -> None:
        """Reload configuration from disk."""
        self._config = self._load_config()


# Global singleton
_config: Optional[UserConfig] = None


def get_user_config(project_root: Optional[Path] = None) -> UserConfig:
    """
    Get the user configuration singleton.

    Args:
        project_root: Optional project root override (bypasses the singleton)
    """
    global _config
    if project_root is not None:
        return UserConfig(project_root)
    if _config is None:
        _config = UserConfig()
    return _config


def reset_user_config() -> None:
    """Reset the global config singleton (for testing)."""
    global _config
    _config = None
