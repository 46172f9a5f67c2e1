"""Blocking notice dialog.

Used to report failed imports and refused exports. The user has to
acknowledge the notice before continuing.
"""
# Created: 2026-10-19

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, Label, Static
from textual.screen import ModalScreen


class NoticeModal(ModalScreen):
    """Modal dialog showing a message with a single OK button."""

    DEFAULT_CSS = """
    NoticeModal {
        align: center middle;
    }

    NoticeModal > Container {
        width: 60;
        height: auto;
        min-height: 9;
        max-height: 20;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    NoticeModal.error > Container {
        border: thick $error;
    }

    NoticeModal .modal-title {
        text-style: bold;
        color: $warning;
        margin-bottom: 1;
    }

    NoticeModal .modal-message {
        margin-bottom: 1;
        color: $text;
    }

    NoticeModal .modal-details {
        margin-bottom: 1;
        color: $text-muted;
        text-style: italic;
    }

    NoticeModal .button-container {
        height: 3;
        align: center middle;
    }

    NoticeModal Button {
        width: 12;
    }
    """

    def __init__(
        self,
        title: str = "Notice",
        message: str = "",
        details: str = "",
        error: bool = False
    ) -> None:
        """Initialize notice modal.

        Args:
            title: Title of the dialog
            message: Main message
            details: Additional details (optional)
            error: Style the dialog as an error
        """
        super().__init__(classes="error" if error else None)
        self.notice_title = title
        self.message = message
        self.details = details

    def compose(self) -> ComposeResult:
        with Container():
            yield Label(self.notice_title, classes="modal-title")
            yield Static(self.message, classes="modal-message", markup=False)

            if self.details:
                yield Static(self.details, classes="modal-details", markup=False)

            with Horizontal(classes="button-container"):
                yield Button("OK", variant="primary", id="ok")

    def on_mount(self) -> None:
        self.query_one("#ok", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(True)

    def on_key(self, event) -> None:
        if event.key in ("escape", "enter"):
            event.stop()
            self.dismiss(True)
