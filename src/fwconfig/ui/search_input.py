"""Search and filter bar for the friends list.

Live search over friend names plus the filter mode selector.
"""
# Created: 2026-10-19

import logging
from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Input, Select, Static

from ..filters import FilterMode

logger = logging.getLogger(__name__)


class SearchChanged(Message):
    """Message sent when the search text changes."""

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text


class FilterChanged(Message):
    """Message sent when another filter mode is picked."""

    def __init__(self, mode: FilterMode) -> None:
        super().__init__()
        self.mode = mode


class SearchBar(Horizontal):
    """Search input and filter selector above the friends list."""

    DEFAULT_CSS = """
    SearchBar {
        height: auto;
        padding: 0 1;
    }

    SearchBar .filter-label {
        width: auto;
        margin: 1 1 0 0;
        color: $text-muted;
    }

    SearchBar Select {
        width: 24;
    }

    SearchBar Input {
        width: 1fr;
        border: tall $accent;
    }

    SearchBar Input:focus {
        border: tall $primary;
    }
    """

    def __init__(self, mode: FilterMode = FilterMode.ALL, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.initial_mode = mode
        self.input_field: Optional[Input] = None

    def compose(self) -> ComposeResult:
        yield Static("Filter By:", classes="filter-label")
        yield Select(
            [(mode.label, mode) for mode in FilterMode],
            value=self.initial_mode,
            allow_blank=False,
            id="filter-select",
        )
        self.input_field = Input(placeholder="Search friends...", id="search-input")
        yield self.input_field

    def focus_search(self) -> None:
        if self.input_field:
            self.input_field.focus()

    def set_friend_count(self, count: int) -> None:
        """Show the number of loaded friends in the placeholder."""
        if self.input_field:
            self.input_field.placeholder = f"Search {count} friends..."

    def set_mode(self, mode: FilterMode) -> None:
        """Select a mode without reporting it back as a change."""
        select = self.query_one("#filter-select", Select)
        with self.prevent(Select.Changed):
            select.value = mode

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(SearchChanged(event.value))

    def on_select_changed(self, event: Select.Changed) -> None:
        event.stop()
        if isinstance(event.value, FilterMode):
            logger.debug(f"Filter mode changed to {event.value.value}")
            self.post_message(FilterChanged(event.value))
