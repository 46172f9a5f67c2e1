"""Editing session state.

Holds the current settings document, the loaded friends list and the view
filters. Each store is replaced wholesale; a failed import leaves the store
as it was.
"""
# Created: 2026-10-19

import logging
from pathlib import Path
from typing import List, Optional, Union

from .editor import set_alias, toggle_watched, update_field
from .export import ConfigExporter
from .filters import FilterMode, filter_friends
from .importers import load_config_file, load_friends_file, parse_config, parse_friends
from .models import Friend, WatchConfig

logger = logging.getLogger(__name__)


class EditorSession:
    """Config store, friends store and view filters for one editor."""

    def __init__(self, exporter: Optional[ConfigExporter] = None,
                 filter_mode: FilterMode = FilterMode.ALL):
        self.config = WatchConfig()
        self.friends: List[Friend] = []
        self.search_text = ""
        self.filter_mode = filter_mode
        self.exporter = exporter or ConfigExporter()
        self.config_source: Optional[Path] = None
        self.friends_source: Optional[Path] = None

    # Importers

    def load_config_text(self, text: str, source: Optional[Union[str, Path]] = None) -> WatchConfig:
        """Replace the settings document with parsed YAML text.

        Raises:
            ConfigParseError: The current document is kept
        """
        self.config = parse_config(text, source)
        self.config_source = Path(source) if source else None
        return self.config

    def load_config_file(self, path: Union[str, Path]) -> WatchConfig:
        self.config = load_config_file(path)
        self.config_source = Path(path)
        logger.info(f"Loaded configuration from {path}")
        return self.config

    def load_friends_text(self, text: str, source: Optional[Union[str, Path]] = None) -> List[Friend]:
        """Replace the friends list with parsed JSON text.

        Raises:
            FriendsParseError: The current list is kept
        """
        self.friends = parse_friends(text, source)
        self.friends_source = Path(source) if source else None
        return self.friends

    def load_friends_file(self, path: Union[str, Path]) -> List[Friend]:
        self.friends = load_friends_file(path)
        self.friends_source = Path(path)
        logger.info(f"Loaded {len(self.friends)} friends from {path}")
        return self.friends

    # Edits

    def update_field(self, path: str, value) -> WatchConfig:
        self.config = update_field(self.config, path, value)
        return self.config

    def toggle_watched(self, nsa_id: str, enabled: bool) -> WatchConfig:
        self.config = toggle_watched(self.config, nsa_id, enabled)
        return self.config

    def set_alias(self, nsa_id: str, alias: str) -> WatchConfig:
        self.config = set_alias(self.config, nsa_id, alias)
        return self.config

    # View

    @property
    def visible_friends(self) -> List[Friend]:
        """Friends passing the current search text and filter mode."""
        return filter_friends(self.friends, self.config, self.search_text, self.filter_mode)

    def cycle_filter(self) -> FilterMode:
        self.filter_mode = self.filter_mode.cycle()
        return self.filter_mode

    # Export

    def export(self, output_dir: Optional[Union[str, Path]] = None) -> Path:
        """Export the current document.

        Raises:
            NothingToExportError: If there are no aliases and nothing watched
            ExportError: If writing fails
        """
        return self.exporter.export(self.config, output_dir)
