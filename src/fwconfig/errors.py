"""Exceptions raised by the configurator."""
# Created: 2026-10-19

from pathlib import Path
from typing import Optional, Union


class FriendWatchError(Exception):
    """Base class for all configurator errors."""


class ImportFailed(FriendWatchError):
    """An input file could not be parsed. The current state is kept."""

    kind = "file"

    def __init__(self, message: str, source: Optional[Union[str, Path]] = None):
        self.source = str(source) if source is not None else None
        if self.source:
            message = f"{self.source}: {message}"
        super().__init__(message)


class ConfigParseError(ImportFailed):
    """Malformed YAML settings file."""

    kind = "configuration"


class FriendsParseError(ImportFailed):
    """Malformed JSON friends list."""

    kind = "friends list"


class ConfigFieldError(FriendWatchError, ValueError):
    """A field path that does not name an editable setting."""


class NothingToExportError(FriendWatchError):
    """Export refused because there are no aliases and nothing is watched."""

    def __init__(self, message: str = "Configuration is empty. Please load or edit the config first."):
        super().__init__(message)


class ExportError(FriendWatchError):
    """The settings document could not be serialized or written."""
