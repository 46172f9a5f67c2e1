"""Settings form for the watcher configuration.

Checkboxes and text fields for the mode flags and the ntfy block, plus a
read-only view of the watched ids and aliases.
"""
# Created: 2026-10-19

import json
import logging
from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Checkbox, Input, Label, Static

from ..models import WatchConfig

logger = logging.getLogger(__name__)


class FieldChanged(Message):
    """Message sent when a settings field is edited."""

    def __init__(self, path: str, value: Any) -> None:
        """Initialize the message.

        Args:
            path: Field path, e.g. "watchedonly" or "ntfy.server"
            value: bool for checkboxes, str for text fields
        """
        super().__init__()
        self.path = path
        self.value = value


class SettingsPanel(VerticalScroll):
    """Editable settings on the left side of the screen."""

    DEFAULT_CSS = """
    SettingsPanel {
        width: 2fr;
        border: round $primary;
        padding: 0 1;
    }

    SettingsPanel .panel-title {
        text-style: bold;
        color: $primary;
    }

    SettingsPanel .sub-heading {
        text-style: bold;
        margin-top: 1;
    }

    SettingsPanel .field-label {
        color: $text-muted;
    }

    SettingsPanel .read-only-data {
        color: $text-muted;
        margin-bottom: 1;
    }

    SettingsPanel #empty-message {
        color: $text-muted;
        text-style: italic;
        margin-top: 1;
    }

    SettingsPanel #config-form {
        height: auto;
    }

    SettingsPanel.empty #config-form {
        display: none;
    }

    SettingsPanel #empty-message {
        display: none;
    }

    SettingsPanel.empty #empty-message {
        display: block;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label("Configuration Settings", classes="panel-title")
        yield Static("Please load a configuration file.", id="empty-message")

        with Vertical(id="config-form"):
            yield Checkbox("Watched Only", name="watchedonly", id="watchedonly")
            yield Checkbox("Windows Mode", name="windowsmode", id="windowsmode")

            yield Label("Ntfy Settings", classes="sub-heading")
            yield Checkbox("Enabled", name="ntfy.enabled", id="ntfy-enabled")
            yield Label("Server URL", classes="field-label")
            yield Input(name="ntfy.server", id="ntfy-server")
            yield Label("Topic ID", classes="field-label")
            yield Input(name="ntfy.topic", id="ntfy-topic")
            yield Label("Send Test", classes="field-label")
            yield Input(name="ntfy.sendtest", id="ntfy-sendtest")

            yield Label("Non-Editable Data", classes="sub-heading")
            yield Label("Watched Friend IDs (0)", id="watched-heading")
            yield Static("", id="watched-data", classes="read-only-data")
            yield Label("Aliases (0)", id="aliases-heading")
            yield Static("", id="aliases-data", classes="read-only-data")

    def on_mount(self) -> None:
        self.add_class("empty")

    def show_config(self, config: WatchConfig) -> None:
        """Fill the form from a settings document.

        Values set here are not reported back as edits.
        """
        # The form only makes sense once there are aliases to edit
        self.set_class(len(config.alias_map) == 0, "empty")

        with self.prevent(Checkbox.Changed, Input.Changed):
            self.query_one("#watchedonly", Checkbox).value = bool(config.watchedonly)
            self.query_one("#windowsmode", Checkbox).value = bool(config.windowsmode)
            self.query_one("#ntfy-enabled", Checkbox).value = bool(config.ntfy.enabled)
            self.query_one("#ntfy-server", Input).value = str(config.ntfy.server or '')
            self.query_one("#ntfy-topic", Input).value = str(config.ntfy.topic or '')
            self.query_one("#ntfy-sendtest", Input).value = str(config.ntfy.sendtest or 'off')

        self.show_read_only(config)

    def show_read_only(self, config: WatchConfig) -> None:
        """Refresh the watched ids and aliases listing."""
        watched = config.watched_ids
        aliases = config.alias_map

        self.set_class(len(aliases) == 0, "empty")
        self.query_one("#watched-heading", Label).update(f"Watched Friend IDs ({len(watched)})")
        self.query_one("#watched-data", Static).update(Text(", ".join(map(str, watched))))
        self.query_one("#aliases-heading", Label).update(f"Aliases ({len(aliases)})")
        self.query_one("#aliases-data", Static).update(
            Text(json.dumps(aliases, indent=2, ensure_ascii=False))
        )

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        if event.checkbox.name:
            self.post_message(FieldChanged(event.checkbox.name, event.value))

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.input.name:
            self.post_message(FieldChanged(event.input.name, event.value))
