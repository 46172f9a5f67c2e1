"""Modal dialog asking for a file path.

Stands in for a file picker: the user types the path of the settings or
friends file to load.
"""
# Created: 2026-10-19

from pathlib import Path
from typing import Optional

from textual.app import ComposeResult
from textual.containers import Container, Vertical, Horizontal
from textual.widgets import Static, Input, Button
from textual.screen import ModalScreen
from textual.validation import Length


class PathModal(ModalScreen[Optional[Path]]):
    """Prompt for a path. Dismisses with the Path, or None if cancelled."""

    DEFAULT_CSS = """
    PathModal {
        align: center middle;
    }

    PathModal > Container {
        width: 70;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    PathModal Static#title {
        text-align: center;
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
    }

    PathModal Static#hint {
        color: $text-muted;
    }

    PathModal Input {
        margin: 1 0;
    }

    PathModal Container#buttons {
        height: 3;
        align: center middle;
        margin-top: 1;
    }

    PathModal Button {
        margin: 0 1;
    }
    """

    def __init__(self, title: str, hint: str = "", current: str = "") -> None:
        """Initialize the path modal.

        Args:
            title: Dialog title, e.g. "Load Configuration (YAML)"
            hint: Accepted file types
            current: Pre-filled path
        """
        super().__init__()
        self.prompt_title = title
        self.hint = hint
        self.current = current

    def compose(self) -> ComposeResult:
        with Container():
            yield Static(self.prompt_title, id="title")

            with Vertical():
                if self.hint:
                    yield Static(self.hint, id="hint")
                yield Input(
                    value=self.current,
                    placeholder="Path to file",
                    id="path_input",
                    validators=[Length(minimum=1)]
                )

                with Horizontal(id="buttons"):
                    yield Button("Load", variant="primary", id="load")
                    yield Button("Cancel", variant="default", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#path_input", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "load":
            self.submit()
        else:
            self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.submit()

    def on_key(self, event) -> None:
        if event.key == "escape":
            event.stop()
            self.dismiss(None)

    def submit(self) -> None:
        """Validate and return the entered path."""
        path_input = self.query_one("#path_input", Input)

        value = path_input.value.strip()
        if not value:
            path_input.focus()
            return

        self.dismiss(Path(value).expanduser())
