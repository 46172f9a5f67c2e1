"""Shared pytest fixtures for fwconfig tests.

Provides sample settings files and friends list dumps.
"""
# Created: 2026-10-19

import json
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fwconfig.models import Friend, WatchConfig
from fwconfig.importers import parse_config, parse_friends


SAMPLE_CONFIG_YAML = """\
aliases:
  a1b2c3: Mario
  d4e5f6: Luigi
watched:
  - a1b2c3
  - 0f0f0f
watchedonly: true
windowsmode: false
ntfy:
  enabled: true
  server: https://ntfy.sh
  topic: switch-friends
  sendtest: 'off'
"""


def make_friend(friend_id, nsa_id, name, state="ONLINE", logout_at=1700000000, game=None):
    """Build one friend object as found in a friends list dump."""
    return {
        "id": friend_id,
        "nsaId": nsa_id,
        "imageUri": f"https://cdn.example/{nsa_id}.png",
        "image2Uri": "",
        "name": name,
        "isFriend": True,
        "isFavoriteFriend": False,
        "isServiceUser": True,
        "isNew": False,
        "isOnlineNotificationEnabled": True,
        "friendCreatedAt": 1650000000,
        "route": {
            "appName": "",
            "userName": "",
            "shopUri": "",
            "imageUri": "",
            "channel": "",
        },
        "presence": {
            "state": state,
            "updatedAt": 1700000500,
            "logoutAt": logout_at,
            "game": game if game is not None else {},
            "platform": 1,
        },
    }


@pytest.fixture
def friends_data():
    """Raw friend objects covering each presence case."""
    return [
        make_friend(1, "a1b2c3", "Mario", game={
            "name": "Mario Kart 8 Deluxe",
            "imageUri": "https://cdn.example/mk8.png",
            "shopUri": "",
            "totalPlayTime": 1200,
            "firstPlayedAt": 1600000000,
            "sysDescription": "",
        }),
        make_friend(2, "d4e5f6", "Luigi", state="OFFLINE"),
        make_friend(3, "778899", "Peach", logout_at=0),
        make_friend(4, "0f0f0f", "Bowser", state="away"),
        make_friend(5, "123abc", "Toad", state="PLAYING"),
    ]


@pytest.fixture
def friends_json(friends_data):
    return json.dumps(friends_data)


@pytest.fixture
def friends(friends_json):
    return parse_friends(friends_json)


@pytest.fixture
def config_yaml():
    return SAMPLE_CONFIG_YAML


@pytest.fixture
def config(config_yaml) -> WatchConfig:
    return parse_config(config_yaml)


@pytest.fixture
def config_file(tmp_path, config_yaml):
    path = tmp_path / "configuration.yaml"
    path.write_text(config_yaml, encoding="utf-8")
    return path


@pytest.fixture
def friends_file(tmp_path, friends_json):
    path = tmp_path / "friends.json"
    path.write_text(friends_json, encoding="utf-8")
    return path
