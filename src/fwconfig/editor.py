"""Edits to the settings document.

Every function takes the current WatchConfig and returns a new one. The
input document is never modified.
"""
# Created: 2026-10-19

import copy
import logging
from dataclasses import fields, replace
from typing import Any, Union

from .errors import ConfigFieldError
from .models import NtfySettings, WatchConfig

logger = logging.getLogger(__name__)

NTFY_FIELDS = tuple(f.name for f in fields(NtfySettings))
TOP_LEVEL_FIELDS = ('aliases', 'watched', 'watchedonly', 'windowsmode')


def _copy(config: WatchConfig) -> WatchConfig:
    """Structural copy so no collection is shared with the old document."""
    return copy.deepcopy(config)


def update_field(config: WatchConfig, path: str, value: Union[str, bool, Any]) -> WatchConfig:
    """Replace a single field of the settings document.

    Args:
        config: Current document
        path: Top-level key such as "watchedonly", or "ntfy.<field>"
        value: New value; bool for checkboxes, str for text fields

    Returns:
        New document with only that field changed

    Raises:
        ConfigFieldError: If the path does not name an editable field
    """
    new_config = _copy(config)

    if '.' in path:
        parent, _, child = path.partition('.')
        if parent != 'ntfy' or child not in NTFY_FIELDS:
            raise ConfigFieldError(f"Unknown setting: {path}")
        new_config.ntfy = replace(new_config.ntfy, **{child: value})
    elif path in TOP_LEVEL_FIELDS:
        setattr(new_config, path, value)
    elif path == 'ntfy' or path == 'extra' or not path:
        raise ConfigFieldError(f"Cannot replace '{path}' as a single field")
    else:
        new_config.extra[path] = value

    logger.debug(f"Set {path} = {value!r}")
    return new_config


def toggle_watched(config: WatchConfig, nsa_id: str, enabled: bool) -> WatchConfig:
    """Add or remove a friend id from the watched list.

    Enabling never creates duplicates. Disabling removes every occurrence.
    Other entries keep their order.
    """
    new_config = _copy(config)
    watched = new_config.watched_ids

    if enabled:
        # dict keeps first-seen order
        new_config.watched = list(dict.fromkeys([*watched, nsa_id]))
    elif nsa_id in watched:
        new_config.watched = [w for w in watched if w != nsa_id]

    return new_config


def set_alias(config: WatchConfig, nsa_id: str, alias: str) -> WatchConfig:
    """Set or clear the alias of a friend.

    The alias is trimmed. An empty result removes the entry instead of
    storing an empty string.
    """
    new_config = _copy(config)
    aliases = dict(new_config.alias_map)
    alias = alias.strip()

    if alias:
        aliases[nsa_id] = alias
    else:
        aliases.pop(nsa_id, None)

    new_config.aliases = aliases
    return new_config
