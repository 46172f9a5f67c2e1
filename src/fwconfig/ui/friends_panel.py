"""Friends list with per-friend watch and alias controls."""
# Created: 2026-10-19

import logging
from typing import List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Checkbox, Input, Label, Static

from ..models import Friend, WatchConfig

logger = logging.getLogger(__name__)


class WatchToggled(Message):
    """Message sent when a friend's Watched box is toggled."""

    def __init__(self, nsa_id: str, watched: bool) -> None:
        super().__init__()
        self.nsa_id = nsa_id
        self.watched = watched


class AliasEdited(Message):
    """Message sent when a friend's alias text changes."""

    def __init__(self, nsa_id: str, alias: str, final: bool = False) -> None:
        """Initialize the message.

        Args:
            nsa_id: Stable id of the friend
            alias: Raw text of the alias field
            final: True when the user submitted the field
        """
        super().__init__()
        self.nsa_id = nsa_id
        self.alias = alias
        self.final = final


class FriendRow(Vertical):
    """One friend: status line, Watched box and alias field."""

    DEFAULT_CSS = """
    FriendRow {
        height: auto;
        border-bottom: solid $panel-lighten-2;
        padding: 0 1;
    }

    FriendRow .friend-header {
        height: auto;
    }

    FriendRow .friend-options {
        height: auto;
    }

    FriendRow .alias-label {
        width: auto;
        margin: 1 1 0 2;
    }

    FriendRow Input {
        width: 1fr;
    }
    """

    def __init__(self, friend: Friend, watched: bool, alias: str,
                 show_games: bool = True) -> None:
        super().__init__()
        self.friend = friend
        self.watched = watched
        self.alias = alias
        self.show_games = show_games

    def header_text(self) -> Text:
        text = Text(self.friend.status)
        text.append(" | ")
        text.append(self.friend.name or "", style="bold")
        if self.show_games and self.friend.playing:
            text.append(f" - Playing {self.friend.playing}", style="italic")
        return text

    def compose(self) -> ComposeResult:
        yield Static(self.header_text(), classes="friend-header")
        with Horizontal(classes="friend-options"):
            yield Checkbox("Watched", value=self.watched)
            yield Label("Alias", classes="alias-label")
            yield Input(value=self.alias, placeholder=self.friend.name or "")

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        self.post_message(WatchToggled(self.friend.nsa_id, event.value))

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(AliasEdited(self.friend.nsa_id, event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(AliasEdited(self.friend.nsa_id, event.value, final=True))


class FriendsPanel(Vertical):
    """Right side of the screen listing the filtered friends."""

    DEFAULT_CSS = """
    FriendsPanel {
        height: 1fr;
    }

    FriendsPanel .panel-title {
        text-style: bold;
        color: $primary;
        padding: 0 1;
    }

    FriendsPanel #friend-list {
        height: 1fr;
    }

    FriendsPanel .placeholder {
        color: $text-muted;
        text-style: italic;
        padding: 1;
    }
    """

    def __init__(self, show_games: bool = True, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.show_games = show_games
        self.list_container: Optional[VerticalScroll] = None

    def compose(self) -> ComposeResult:
        yield Label("Friends List (0 Loaded)", id="friends-title", classes="panel-title")
        self.list_container = VerticalScroll(id="friend-list")
        with self.list_container:
            yield Static("Please load the friends JSON file.", classes="placeholder")

    async def show_friends(self, total: int, friends: List[Friend], config: WatchConfig) -> None:
        """Rebuild the list.

        Args:
            total: Number of friends loaded before filtering
            friends: Friends to show
            config: Settings document for watched and alias state
        """
        self.query_one("#friends-title", Label).update(f"Friends List ({total} Loaded)")
        if not self.list_container:
            return

        await self.list_container.remove_children()

        if total == 0:
            await self.list_container.mount(
                Static("Please load the friends JSON file.", classes="placeholder")
            )
            return

        if not friends:
            await self.list_container.mount(
                Static("No friends found matching your search or filter criteria.",
                       classes="placeholder")
            )
            return

        rows = [
            FriendRow(
                friend,
                watched=config.is_watched(friend.nsa_id),
                alias=config.alias_for(friend.nsa_id),
                show_games=self.show_games,
            )
            for friend in friends
        ]
        await self.list_container.mount_all(rows)
        logger.debug(f"Showing {len(rows)} of {total} friends")
