"""Settings for the configurator itself.

Not to be confused with the watcher settings being edited. Handles loading
and merging these from the user config file and the environment.
"""
# Created: 2026-10-19

import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional
import yaml
from dataclasses import dataclass, field, asdict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "fwconfig"


@dataclass
class UISettings:
    """UI-related settings."""
    default_filter: str = "ALL"  # ALL, WATCHED or HAS_ALIAS
    show_games: bool = True


@dataclass
class ExportSettings:
    """Where and how the edited configuration is written."""
    directory: str = "."
    filename: str = "configuration.yaml"
    indent: int = 2


@dataclass
class Settings:
    """Main settings container."""
    ui: UISettings = field(default_factory=UISettings)
    export: ExportSettings = field(default_factory=ExportSettings)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Settings':
        """Create Settings from dictionary, ignoring unknown keys."""
        settings = cls()

        for section in ('ui', 'export'):
            values = data.get(section)
            if not isinstance(values, dict):
                continue
            target = getattr(settings, section)
            for key, value in values.items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.debug(f"Ignoring unknown setting {section}.{key}")

        return settings

    def merge(self, other: 'Settings') -> None:
        """Merge another Settings object into this one."""
        for section in ('ui', 'export'):
            self_section = getattr(self, section)
            other_section = getattr(other, section)

            for key in vars(other_section):
                value = getattr(other_section, key)
                if value is not None:  # Only override non-None values
                    setattr(self_section, key, value)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_settings(config_dir: Optional[Path] = None) -> Settings:
    """Load settings from the user config file and environment.

    Sources in order of precedence:
    1. Built-in defaults
    2. User config file (``config.yaml`` in the config directory)
    3. Environment variables ``FWCONFIG_EXPORT_DIR`` and
       ``FWCONFIG_DEFAULT_FILTER``

    Args:
        config_dir: Optional config directory override

    Returns:
        Merged Settings object
    """
    settings = Settings()

    if config_dir is None:
        config_dir = DEFAULT_CONFIG_DIR

    user_config_path = Path(config_dir) / "config.yaml"
    if user_config_path.exists():
        try:
            with open(user_config_path) as f:
                data = yaml.safe_load(f)
            if isinstance(data, dict):
                settings.merge(Settings.from_dict(data))
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load user config {user_config_path}: {e}")

    if export_dir := os.environ.get('FWCONFIG_EXPORT_DIR'):
        settings.export.directory = export_dir

    if default_filter := os.environ.get('FWCONFIG_DEFAULT_FILTER'):
        settings.ui.default_filter = default_filter.upper()

    return settings


def save_settings(settings: Settings, config_dir: Optional[Path] = None) -> Path:
    """Save settings to the user config file.

    Args:
        settings: Settings object to save
        config_dir: Optional config directory override

    Returns:
        Path of the written file
    """
    if config_dir is None:
        config_dir = DEFAULT_CONFIG_DIR

    config_dir = Path(config_dir)
    config_dir.mkdir(parents=True, exist_ok=True)

    config_path = config_dir / "config.yaml"
    with open(config_path, 'w') as f:
        yaml.dump(settings.to_dict(), f, default_flow_style=False, sort_keys=False)
    return config_path
