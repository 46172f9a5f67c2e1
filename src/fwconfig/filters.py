"""Search and filter for the friends list.

The visible list is recomputed from the full list on every call.
"""
# Created: 2026-10-19

import logging
from enum import Enum
from typing import List

from .models import Friend, WatchConfig

logger = logging.getLogger(__name__)


class FilterMode(Enum):
    """Which friends to show."""
    ALL = "ALL"
    WATCHED = "WATCHED"
    HAS_ALIAS = "HAS_ALIAS"

    @property
    def label(self) -> str:
        return FILTER_LABELS[self]

    def cycle(self) -> 'FilterMode':
        """Next mode, wrapping around."""
        modes = list(FilterMode)
        return modes[(modes.index(self) + 1) % len(modes)]


FILTER_LABELS = {
    FilterMode.ALL: "All Friends",
    FilterMode.WATCHED: "Watched",
    FilterMode.HAS_ALIAS: "Has Alias",
}


def matches_search(friend: Friend, search: str) -> bool:
    """Case-insensitive substring match against the display name."""
    if not friend.name:
        return False
    return search.lower() in friend.name.lower()


def passes_filter(friend: Friend, config: WatchConfig, mode: FilterMode) -> bool:
    """Check the filter mode gate for a single friend."""
    if mode == FilterMode.WATCHED:
        return config.is_watched(friend.nsa_id)
    elif mode == FilterMode.HAS_ALIAS:
        return len(config.alias_for(friend.nsa_id).strip()) > 0
    return True


def filter_friends(friends: List[Friend], config: WatchConfig,
                   search: str = "", mode: FilterMode = FilterMode.ALL) -> List[Friend]:
    """Filter friends by search text, then by filter mode.

    Args:
        friends: Full friends list
        config: Settings document providing watched ids and aliases
        search: Text to look for in friend names
        mode: Filter mode gate

    Returns:
        Friends passing both checks, in input order
    """
    filtered = [
        friend for friend in friends
        if matches_search(friend, search) and passes_filter(friend, config, mode)
    ]
    logger.debug(f"Filtered {len(friends)} friends to {len(filtered)} (mode={mode.value}, search={search!r})")
    return filtered
