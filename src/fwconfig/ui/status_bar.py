"""Status bar widget.

Shows the loaded files, friend counts and keyboard hints.
"""
# Created: 2026-10-19

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static
from textual.widget import Widget

from ..filters import FilterMode


class StatusBar(Widget):
    """Status bar showing context and friend counts."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        dock: bottom;
    }

    StatusBar > Horizontal {
        width: 100%;
        height: 1;
    }

    StatusBar .status-left {
        width: 1fr;
        padding: 0 1;
    }

    StatusBar .status-center {
        width: 2fr;
        text-align: center;
        padding: 0 1;
        color: $text-muted;
    }

    StatusBar .status-right {
        width: 1fr;
        text-align: right;
        padding: 0 1;
    }
    """

    DEFAULT_HINTS = "c:config f:friends s:save /:search m:filter q:quit"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.left_widget: Optional[Static] = None
        self.center_widget: Optional[Static] = None
        self.right_widget: Optional[Static] = None

    def compose(self) -> ComposeResult:
        with Horizontal():
            self.left_widget = Static("", classes="status-left", markup=False)
            self.center_widget = Static(self.DEFAULT_HINTS, classes="status-center", markup=False)
            self.right_widget = Static("", classes="status-right", markup=False)

            yield self.left_widget
            yield self.center_widget
            yield self.right_widget

    def update_context(self, config_name: Optional[str]) -> None:
        """Show which settings file is being edited (left side)."""
        if self.left_widget:
            self.left_widget.update(config_name or "No configuration loaded")

    def update_counts(self, total: int, shown: int, mode: FilterMode) -> None:
        """Show friend counts and the filter mode (right side)."""
        if self.right_widget:
            self.right_widget.update(f"{shown}/{total} friends | {mode.label}")

    def show_message(self, message: str, duration: int = 3) -> None:
        """Show a temporary message in the center."""
        if self.center_widget:
            self.center_widget.update(message)

            def reset():
                if self.center_widget:
                    self.center_widget.update(self.DEFAULT_HINTS)

            self.set_timer(duration, reset)
