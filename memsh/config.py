"""
Shell configuration management for memsh
"""

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigError
from .filesystem.builder import HOME_DIRECTORY, default_layout

logger = logging.getLogger('memsh.config')

DEFAULT_AUDIT_LOG = 'emulator_log.csv'

@dataclass
class ShellConfig:
    """Settings for one shell session"""
    user: str = 'user'
    audit_log: str = DEFAULT_AUDIT_LOG
    start_directory: str = HOME_DIRECTORY
    intro: Optional[str] = None
    tree: Dict[str, Any] = field(default_factory=default_layout)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ShellConfig':
        """Create from dictionary, rejecting unknown keys"""
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        config = cls(**data)
        if not isinstance(config.tree, dict):
            raise ConfigError("'tree' must be a mapping")
        for key in ('user', 'audit_log', 'start_directory'):
            if not isinstance(getattr(config, key), str) or not getattr(config, key):
                raise ConfigError(f"'{key}' must be a non-empty string")
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def with_overrides(self, **overrides) -> 'ShellConfig':
        """Copy with every non-None override applied"""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

def load_config(path: Optional[str] = None) -> ShellConfig:
    """Load configuration from a YAML file, or the defaults when path is None"""
    if path is None:
        return ShellConfig()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    logger.debug(f"Loaded configuration from {path}")
    return ShellConfig.from_dict(data or {})

def dump_config(config: ShellConfig) -> str:
    return yaml.safe_dump(config.to_dict(), default_flow_style=False, allow_unicode=True, sort_keys=False)
