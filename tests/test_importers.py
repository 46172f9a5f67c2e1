"""Tests for settings and friends list importers."""
# Created: 2026-10-19

import json
import pytest

from fwconfig.errors import ConfigParseError, FriendsParseError
from fwconfig.importers import (
    load_config_file,
    load_friends_file,
    parse_config,
    parse_friends,
)


class TestParseConfig:
    """Test the YAML settings importer."""

    def test_full_document(self, config):
        assert config.aliases == {"a1b2c3": "Mario", "d4e5f6": "Luigi"}
        assert config.watched == ["a1b2c3", "0f0f0f"]
        assert config.watchedonly is True
        assert config.windowsmode is False
        assert config.ntfy.enabled is True
        assert config.ntfy.server == "https://ntfy.sh"
        assert config.ntfy.topic == "switch-friends"
        assert config.ntfy.sendtest == "off"

    def test_missing_ntfy_block_gets_defaults(self):
        config = parse_config("aliases:\n  abc: Friend\n")

        assert config.ntfy.enabled is False
        assert config.ntfy.server == ""
        assert config.ntfy.topic == ""
        assert config.ntfy.sendtest == "off"

    def test_partial_ntfy_block(self):
        config = parse_config("ntfy:\n  topic: mine\n")

        assert config.ntfy.topic == "mine"
        assert config.ntfy.enabled is False
        assert config.ntfy.sendtest == "off"

    def test_other_fields_are_not_defaulted(self):
        config = parse_config("ntfy:\n  enabled: true\n")

        assert config.aliases is None
        assert config.watched is None
        assert config.watchedonly is None
        assert config.windowsmode is None

    def test_malformed_yaml(self):
        with pytest.raises(ConfigParseError):
            parse_config("aliases: [unclosed")

    @pytest.mark.parametrize("text", ["", "just a string", "- a\n- b\n"])
    def test_non_mapping_document(self, text):
        with pytest.raises(ConfigParseError):
            parse_config(text)

    def test_numeric_alias_and_ids_become_text(self):
        config = parse_config("aliases:\n  a1b2c3: 1234\n  777: Yoshi\nwatched:\n  - 777\n")

        assert config.aliases == {"a1b2c3": "1234", "777": "Yoshi"}
        assert config.watched == ["777"]
        assert config.alias_for("a1b2c3").strip() == "1234"

    @pytest.mark.parametrize("text", [
        "aliases: [a1b2c3]\n",
        "aliases: Mario\n",
        "aliases:\n  a1b2c3:\n    name: Mario\n",
        "watched: a1b2c3\n",
        "watched:\n  a1b2c3: true\n",
        "watched:\n  - [a1b2c3]\n",
    ])
    def test_wrong_section_shape(self, text):
        with pytest.raises(ConfigParseError):
            parse_config(text)

    def test_bare_off_stays_text(self):
        config = parse_config(
            "aliases:\n  abc: A\nntfy:\n  enabled: true\n  sendtest: off\n"
        )

        assert config.ntfy.sendtest == "off"
        assert config.to_dict()["ntfy"]["sendtest"] == "off"

    def test_bare_on_stays_text(self):
        config = parse_config("ntfy:\n  sendtest: on\n  topic: 42\n")

        assert config.ntfy.sendtest == "on"
        assert config.ntfy.topic == "42"

    def test_error_names_source(self):
        with pytest.raises(ConfigParseError) as exc_info:
            parse_config("[", source="settings.yaml")
        assert "settings.yaml" in str(exc_info.value)

    def test_load_file(self, config_file):
        config = load_config_file(config_file)
        assert config.alias_for("d4e5f6") == "Luigi"

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigParseError):
            load_config_file(tmp_path / "nope.yaml")


class TestParseFriends:
    """Test the JSON friends importer."""

    def test_parses_all_friends_in_order(self, friends):
        assert [f.name for f in friends] == ["Mario", "Luigi", "Peach", "Bowser", "Toad"]

    def test_empty_array(self):
        assert parse_friends("[]") == []

    def test_malformed_json(self):
        with pytest.raises(FriendsParseError):
            parse_friends("[{\"id\": 1,")

    def test_not_an_array(self):
        with pytest.raises(FriendsParseError):
            parse_friends(json.dumps({"id": 1}))

    def test_entry_not_an_object(self):
        with pytest.raises(FriendsParseError):
            parse_friends("[1, 2]")

    def test_load_file(self, friends_file):
        friends = load_friends_file(friends_file)
        assert len(friends) == 5
