"""Data models for watcher settings and friend snapshots.

Defines the settings document that gets edited and exported, and the
read-only friend records loaded from a friends list dump.
"""
# Created: 2026-10-19

from dataclasses import dataclass, field, fields
from typing import Optional, List, Dict, Any
from enum import Enum


class PresenceState(Enum):
    """Presence states reported by the friends service."""
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"
    AWAY = "AWAY"


STATUS_INVISIBLE = "👻 INVISIBLE"
STATUS_LABELS = {
    PresenceState.ONLINE: "🟢 ONLINE",
    PresenceState.OFFLINE: "⚫ OFFLINE",
    PresenceState.AWAY: "🌙 AWAY",
}
STATUS_OTHER_ICON = "⚪"


@dataclass
class NtfySettings:
    """Push notification settings (the ``ntfy`` block)."""
    enabled: bool = False
    server: str = ""
    topic: str = ""
    sendtest: str = "off"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'NtfySettings':
        """Build from a parsed ``ntfy`` mapping, defaulting absent fields.

        A key holding ``null`` counts as absent. YAML 1.1 reads a bare
        ``sendtest: off`` as a boolean, so booleans map back to
        ``"on"``/``"off"``.
        """
        settings = cls()
        if not isinstance(data, dict):
            return settings
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                continue
            if f.name == 'enabled':
                value = bool(value)
            elif isinstance(value, bool):
                value = "on" if value else "off"
            else:
                value = str(value)
            setattr(settings, f.name, value)
        return settings

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Top-level keys in the order they are written back out
CONFIG_KEYS = ('aliases', 'watched', 'ntfy', 'watchedonly', 'windowsmode')


@dataclass
class WatchConfig:
    """The editable settings document.

    Defaults describe the startup state. A document imported from a file
    uses ``None`` for top-level keys the file did not have, so they are
    left out again on export.
    """
    aliases: Optional[Dict[str, str]] = field(default_factory=dict)
    watched: Optional[List[str]] = field(default_factory=list)
    ntfy: NtfySettings = field(default_factory=NtfySettings)
    watchedonly: Optional[bool] = False
    windowsmode: Optional[bool] = False

    # Keys we do not edit, kept so they survive a round trip
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WatchConfig':
        """Create a WatchConfig from a parsed settings mapping.

        Args:
            data: Top-level mapping from the YAML file

        Returns:
            WatchConfig instance with the ntfy block fully defaulted
        """
        aliases = data.get('aliases')
        if isinstance(aliases, dict):
            # Numeric ids and aliases come back from YAML as ints
            aliases = {
                str(k): v if v is None else str(v) for k, v in aliases.items()
            }
        watched = data.get('watched')
        if isinstance(watched, list):
            watched = [str(nsa_id) for nsa_id in watched]

        return cls(
            aliases=aliases,
            watched=watched,
            ntfy=NtfySettings.from_dict(data.get('ntfy')),
            watchedonly=data.get('watchedonly'),
            windowsmode=data.get('windowsmode'),
            extra={k: v for k, v in data.items() if k not in CONFIG_KEYS},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the mapping written to ``configuration.yaml``."""
        data: Dict[str, Any] = {}
        for key in CONFIG_KEYS:
            if key == 'ntfy':
                data[key] = self.ntfy.to_dict()
                continue
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        data.update(self.extra)
        return data

    @property
    def alias_map(self) -> Dict[str, str]:
        """Aliases, empty when the document has none."""
        return self.aliases or {}

    @property
    def watched_ids(self) -> List[str]:
        """Watched ids, empty when the document has none."""
        return self.watched or []

    def is_watched(self, nsa_id: str) -> bool:
        return nsa_id in self.watched_ids

    def alias_for(self, nsa_id: str) -> str:
        return self.alias_map.get(nsa_id) or ''

    def is_empty(self) -> bool:
        """True when there is nothing worth exporting."""
        return len(self.alias_map) == 0 and len(self.watched_ids) == 0


@dataclass(frozen=True)
class Game:
    """Game a friend is currently playing."""
    name: str = ""
    image_uri: str = ""
    shop_uri: str = ""
    total_play_time: int = 0
    first_played_at: int = 0
    sys_description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Optional['Game']:
        """Parse a game object; the snapshot uses ``{}`` for "not playing"."""
        if not isinstance(data, dict) or not isinstance(data.get('name'), str):
            return None
        return cls(
            name=data['name'],
            image_uri=data.get('imageUri', ''),
            shop_uri=data.get('shopUri', ''),
            total_play_time=data.get('totalPlayTime', 0),
            first_played_at=data.get('firstPlayedAt', 0),
            sys_description=data.get('sysDescription', ''),
        )


@dataclass(frozen=True)
class Presence:
    """Online presence of a friend."""
    state: str = ""
    updated_at: int = 0
    logout_at: Optional[int] = None
    game: Optional[Game] = None
    platform: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Presence':
        return cls(
            state=str(data.get('state') or ''),
            updated_at=data.get('updatedAt', 0),
            logout_at=data.get('logoutAt'),
            game=Game.from_dict(data.get('game')),
            platform=data.get('platform', 0),
        )


@dataclass(frozen=True)
class Route:
    """Channel and shop metadata attached to a friend."""
    app_name: str = ""
    user_name: str = ""
    shop_uri: str = ""
    image_uri: str = ""
    channel: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Route':
        return cls(
            app_name=data.get('appName', ''),
            user_name=data.get('userName', ''),
            shop_uri=data.get('shopUri', ''),
            image_uri=data.get('imageUri', ''),
            channel=data.get('channel', ''),
        )


@dataclass(frozen=True)
class Friend:
    """One entry of a friends list snapshot. Never edited."""
    id: Any
    nsa_id: str
    name: Optional[str] = None
    image_uri: str = ""
    image2_uri: str = ""
    is_friend: bool = False
    is_favorite_friend: bool = False
    is_service_user: bool = False
    is_new: bool = False
    is_online_notification_enabled: bool = False
    friend_created_at: int = 0
    route: Route = field(default_factory=Route)
    presence: Optional[Presence] = None

    @classmethod
    def from_dict(cls, item: Dict[str, Any]) -> 'Friend':
        """Create a Friend from one element of the friends JSON array.

        Args:
            item: Friend object with camelCase keys

        Returns:
            Friend instance
        """
        presence = item.get('presence')
        route = item.get('route')

        return cls(
            id=item.get('id'),
            nsa_id=item.get('nsaId', ''),
            name=item.get('name'),
            image_uri=item.get('imageUri', ''),
            image2_uri=item.get('image2Uri', ''),
            is_friend=item.get('isFriend', False),
            is_favorite_friend=item.get('isFavoriteFriend', False),
            is_service_user=item.get('isServiceUser', False),
            is_new=item.get('isNew', False),
            is_online_notification_enabled=item.get('isOnlineNotificationEnabled', False),
            friend_created_at=item.get('friendCreatedAt', 0),
            route=Route.from_dict(route) if isinstance(route, dict) else Route(),
            presence=Presence.from_dict(presence) if isinstance(presence, dict) else None,
        )

    @property
    def playing(self) -> Optional[str]:
        """Name of the game being played, if any."""
        if self.presence and self.presence.game and self.presence.game.name:
            return self.presence.game.name
        return None

    @property
    def status(self) -> str:
        return format_status(self.presence)

    def __str__(self) -> str:
        """String representation for display."""
        text = f"{self.status} | {self.name or ''}"
        if self.playing:
            text += f" - Playing {self.playing}"
        return text


def format_status(presence: Optional[Presence]) -> str:
    """Format a presence record as a short status label.

    A ``logout_at`` of zero means the friend hides their status, so they are
    shown as invisible whatever state is reported.

    Args:
        presence: Presence sub-record, may be missing

    Returns:
        Label such as "🟢 ONLINE" or "⚪ PLAYING"
    """
    if presence is not None and presence.logout_at == 0:
        return STATUS_INVISIBLE

    state = ((presence.state if presence else '') or 'UNKNOWN').upper()
    try:
        return STATUS_LABELS[PresenceState(state)]
    except ValueError:
        return f"{STATUS_OTHER_ICON} {state}"
