"""Export of the settings document to YAML.

Writes the edited settings as ``configuration.yaml`` for the watcher.
"""
# Created: 2026-10-19

import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from .errors import ExportError, NothingToExportError
from .models import WatchConfig
from .config.settings import ExportSettings

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "configuration.yaml"


def render_yaml(config: WatchConfig, indent: int = 2) -> str:
    """Serialize a settings document to YAML text.

    Args:
        config: Document to serialize
        indent: Indentation width

    Returns:
        YAML text

    Raises:
        ExportError: If the document holds values YAML cannot represent
    """
    try:
        return yaml.safe_dump(
            config.to_dict(),
            indent=indent,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        logger.error(f"Error serializing configuration: {e}")
        raise ExportError(f"Failed to serialize configuration: {e}") from e


class ConfigExporter:
    """Export settings documents to a directory."""

    def __init__(self, settings: Optional[ExportSettings] = None):
        """Initialize exporter.

        Args:
            settings: Export directory, file name and indent; defaults apply
                when omitted
        """
        self.settings = settings or ExportSettings()

    @property
    def output_dir(self) -> Path:
        return Path(self.settings.directory).expanduser()

    def check(self, config: WatchConfig) -> None:
        """Refuse to export a document with no aliases and nothing watched.

        Raises:
            NothingToExportError: If there is nothing to export
        """
        if config.is_empty():
            logger.warning("Export refused: configuration has no aliases and no watched friends")
            raise NothingToExportError()

    def export(self, config: WatchConfig,
               output_dir: Optional[Union[str, Path]] = None) -> Path:
        """Write the document as YAML.

        Args:
            config: Document to export
            output_dir: Directory override; the configured directory otherwise

        Returns:
            Path of the written file

        Raises:
            NothingToExportError: If there is nothing to export
            ExportError: If serializing or writing fails
        """
        self.check(config)
        text = render_yaml(config, indent=self.settings.indent)

        directory = Path(output_dir).expanduser() if output_dir else self.output_dir
        output_path = directory / (self.settings.filename or DEFAULT_FILENAME)

        try:
            directory.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            logger.error(f"Error saving configuration: {e}")
            raise ExportError(f"Failed to save configuration file: {e}") from e

        logger.info(f"Exported configuration to {output_path}")
        return output_path
