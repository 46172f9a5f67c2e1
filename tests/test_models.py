"""Tests for friend records, the settings document and status labels."""
# Created: 2026-10-19

from fwconfig.models import (
    Friend,
    NtfySettings,
    Presence,
    WatchConfig,
    format_status,
)


class TestFormatStatus:
    """Test presence status labels."""

    def test_known_states(self):
        assert format_status(Presence(state="ONLINE", logout_at=1)) == "🟢 ONLINE"
        assert format_status(Presence(state="OFFLINE", logout_at=1)) == "⚫ OFFLINE"
        assert format_status(Presence(state="AWAY", logout_at=1)) == "🌙 AWAY"

    def test_state_is_upper_cased(self):
        assert format_status(Presence(state="online", logout_at=5)) == "🟢 ONLINE"

    def test_logout_zero_is_invisible_even_when_online(self):
        assert format_status(Presence(state="ONLINE", logout_at=0)) == "👻 INVISIBLE"

    def test_unknown_state_passes_through(self):
        assert format_status(Presence(state="playing", logout_at=5)) == "⚪ PLAYING"

    def test_missing_state(self):
        assert format_status(Presence(state="", logout_at=5)) == "⚪ UNKNOWN"

    def test_missing_presence(self):
        assert format_status(None) == "⚪ UNKNOWN"

    def test_missing_logout_is_not_invisible(self):
        assert format_status(Presence(state="ONLINE")) == "🟢 ONLINE"


class TestFriend:
    """Test Friend parsing from the JSON dump."""

    def test_from_dict_maps_fields(self, friends_data):
        friend = Friend.from_dict(friends_data[0])

        assert friend.id == 1
        assert friend.nsa_id == "a1b2c3"
        assert friend.name == "Mario"
        assert friend.is_friend is True
        assert friend.is_service_user is True
        assert friend.friend_created_at == 1650000000
        assert friend.presence.state == "ONLINE"
        assert friend.presence.platform == 1
        assert friend.route.channel == ""

    def test_playing_game(self, friends_data):
        friend = Friend.from_dict(friends_data[0])
        assert friend.playing == "Mario Kart 8 Deluxe"
        assert friend.presence.game.total_play_time == 1200

    def test_empty_game_object_means_not_playing(self, friends_data):
        friend = Friend.from_dict(friends_data[1])
        assert friend.presence.game is None
        assert friend.playing is None

    def test_missing_fields_take_defaults(self):
        friend = Friend.from_dict({"id": 9, "nsaId": "x"})

        assert friend.name is None
        assert friend.presence is None
        assert friend.route.app_name == ""
        assert friend.status == "⚪ UNKNOWN"

    def test_str(self, friends_data):
        friend = Friend.from_dict(friends_data[0])
        assert str(friend) == "🟢 ONLINE | Mario - Playing Mario Kart 8 Deluxe"


class TestWatchConfig:
    """Test the settings document."""

    def test_startup_state(self):
        config = WatchConfig()

        assert config.aliases == {}
        assert config.watched == []
        assert config.watchedonly is False
        assert config.windowsmode is False
        assert config.ntfy == NtfySettings()
        assert config.is_empty()

    def test_ntfy_defaults(self):
        ntfy = NtfySettings()
        assert ntfy.enabled is False
        assert ntfy.server == ""
        assert ntfy.topic == ""
        assert ntfy.sendtest == "off"

    def test_ntfy_null_counts_as_absent(self):
        ntfy = NtfySettings.from_dict({"enabled": True, "server": None})
        assert ntfy.enabled is True
        assert ntfy.server == ""

    def test_ntfy_values_take_declared_types(self):
        ntfy = NtfySettings.from_dict(
            {"enabled": 1, "server": 8080, "topic": "t", "sendtest": False}
        )
        assert ntfy == NtfySettings(enabled=True, server="8080", topic="t", sendtest="off")
        assert NtfySettings.from_dict({"sendtest": True}).sendtest == "on"

    def test_to_dict_skips_missing_top_level_keys(self):
        config = WatchConfig.from_dict({"aliases": {"a": "A"}})
        data = config.to_dict()

        assert data == {
            "aliases": {"a": "A"},
            "ntfy": {"enabled": False, "server": "", "topic": "", "sendtest": "off"},
        }

    def test_unknown_keys_survive(self):
        config = WatchConfig.from_dict({"watched": ["a"], "interval": 60})
        assert config.extra == {"interval": 60}
        assert config.to_dict()["interval"] == 60

    def test_missing_collections_read_as_empty(self):
        config = WatchConfig.from_dict({})
        assert config.aliases is None
        assert config.alias_map == {}
        assert config.watched_ids == []
        assert config.alias_for("a") == ""
        assert not config.is_watched("a")
