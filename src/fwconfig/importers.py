"""Importers for settings and friends list files.

Parsing never touches existing state: a failure raises and the caller keeps
whatever it had before.
"""
# Created: 2026-10-19

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml

from .errors import ConfigParseError, FriendsParseError
from .models import Friend, WatchConfig

logger = logging.getLogger(__name__)


def parse_config(text: str, source: Optional[Union[str, Path]] = None) -> WatchConfig:
    """Parse settings YAML into a WatchConfig.

    Args:
        text: Raw YAML text
        source: Optional file name used in error messages

    Returns:
        New WatchConfig with the ntfy block defaulted

    Raises:
        ConfigParseError: If the text is not YAML, not a mapping, or its
            aliases or watched sections have the wrong shape
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML file: {e}")
        raise ConfigParseError(f"Invalid YAML: {e}", source) from e

    if not isinstance(data, dict):
        logger.error(f"Settings document is {type(data).__name__}, expected a mapping")
        raise ConfigParseError("Settings file must contain a YAML mapping", source)

    _check_lists(data, source)

    config = WatchConfig.from_dict(data)
    logger.debug(
        f"Parsed settings: {len(config.alias_map)} aliases, {len(config.watched_ids)} watched"
    )
    return config


def _check_lists(data: dict, source: Optional[Union[str, Path]]) -> None:
    """Reject ``aliases`` and ``watched`` sections the editor cannot show."""
    aliases = data.get('aliases')
    if aliases is not None:
        if not isinstance(aliases, dict):
            logger.error(f"aliases is {type(aliases).__name__}, expected a mapping")
            raise ConfigParseError("'aliases' must be a mapping of friend id to alias", source)
        for nsa_id, alias in aliases.items():
            if isinstance(alias, (dict, list)):
                raise ConfigParseError(f"Alias for {nsa_id} must be text", source)

    watched = data.get('watched')
    if watched is not None:
        if not isinstance(watched, list):
            logger.error(f"watched is {type(watched).__name__}, expected a list")
            raise ConfigParseError("'watched' must be a list of friend ids", source)
        for nsa_id in watched:
            if isinstance(nsa_id, (dict, list)) or nsa_id is None:
                raise ConfigParseError(f"Watched entry {nsa_id!r} is not a friend id", source)


def parse_friends(text: str, source: Optional[Union[str, Path]] = None) -> List[Friend]:
    """Parse a friends list JSON dump.

    Args:
        text: Raw JSON text holding an array of friend objects
        source: Optional file name used in error messages

    Returns:
        List of Friend records in file order

    Raises:
        FriendsParseError: If the text is not JSON or not an array of objects
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing JSON file: {e}")
        raise FriendsParseError(f"Invalid JSON: {e}", source) from e

    if not isinstance(data, list):
        raise FriendsParseError("Friends file must contain a JSON array", source)

    friends = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise FriendsParseError(f"Entry {index} is not a friend object", source)
        friends.append(Friend.from_dict(item))

    logger.debug(f"Parsed {len(friends)} friends")
    return friends


def _read_text(path: Path, error_cls) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {path}: {e}")
        raise error_cls(f"Could not read file: {e}", path) from e


def load_config_file(path: Union[str, Path]) -> WatchConfig:
    """Read and parse a settings YAML file."""
    path = Path(path)
    return parse_config(_read_text(path, ConfigParseError), source=path)


def load_friends_file(path: Union[str, Path]) -> List[Friend]:
    """Read and parse a friends list JSON file."""
    path = Path(path)
    return parse_friends(_read_text(path, FriendsParseError), source=path)
