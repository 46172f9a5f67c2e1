"""Main Friend Watch Configurator TUI application.

Coordinates the settings form, the friends list and file import/export.
"""
# Created: 2026-10-19

from pathlib import Path
from typing import Optional
import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header

from .config.settings import Settings, load_settings
from .errors import ConfigFieldError, ExportError, ImportFailed, NothingToExportError
from .export import ConfigExporter
from .filters import FilterMode
from .session import EditorSession
from .ui.friends_panel import AliasEdited, FriendsPanel, WatchToggled
from .ui.notice_modal import NoticeModal
from .ui.path_modal import PathModal
from .ui.search_input import FilterChanged, SearchBar, SearchChanged
from .ui.settings_panel import FieldChanged, SettingsPanel
from .ui.status_bar import StatusBar


logger = logging.getLogger(__name__)


class FriendWatchApp(App):
    """Main application class for the Friend Watch Configurator."""

    TITLE = "Friend Watch Configuration"
    SUB_TITLE = "SwitchFriendWatch settings editor"

    CSS = """
    #main-container {
        height: 1fr;
    }

    #friends-column {
        width: 3fr;
        border: round $primary;
    }
    """

    BINDINGS = [
        Binding("c", "load_config", "Load Config"),
        Binding("f", "load_friends", "Load Friends"),
        Binding("s", "save_config", "Save Config"),
        Binding("/", "search", "Search"),
        Binding("m", "cycle_filter", "Filter"),
        Binding("escape", "blur", "Unfocus", show=False),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self,
                 config_path: Optional[Path] = None,
                 friends_path: Optional[Path] = None,
                 output_dir: Optional[Path] = None,
                 settings: Optional[Settings] = None):
        """Initialize the application.

        Args:
            config_path: Settings YAML to load on startup
            friends_path: Friends JSON to load on startup
            output_dir: Directory for the exported configuration.yaml
            settings: Configurator settings; loaded from disk if omitted
        """
        super().__init__()

        self.settings = settings or load_settings()
        if output_dir:
            self.settings.export.directory = str(output_dir)

        try:
            mode = FilterMode(self.settings.ui.default_filter)
        except ValueError:
            logger.warning(f"Unknown default filter {self.settings.ui.default_filter!r}, using ALL")
            mode = FilterMode.ALL

        self.session = EditorSession(
            exporter=ConfigExporter(self.settings.export),
            filter_mode=mode,
        )
        self.startup_config = config_path
        self.startup_friends = friends_path

        # UI components
        self.settings_panel: Optional[SettingsPanel] = None
        self.friends_panel: Optional[FriendsPanel] = None
        self.search_bar: Optional[SearchBar] = None
        self.status_bar: Optional[StatusBar] = None

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield Header()

        with Horizontal(id="main-container"):
            self.settings_panel = SettingsPanel(id="settings-panel")
            yield self.settings_panel

            with Vertical(id="friends-column"):
                self.search_bar = SearchBar(self.session.filter_mode, id="search-bar")
                yield self.search_bar
                self.friends_panel = FriendsPanel(
                    show_games=self.settings.ui.show_games, id="friends-panel"
                )
                yield self.friends_panel

        self.status_bar = StatusBar(id="status-bar")
        yield self.status_bar
        yield Footer()

    async def on_mount(self) -> None:
        """Load files passed on the command line."""
        if self.startup_config:
            self.load_config(self.startup_config)
        if self.startup_friends:
            await self.load_friends(self.startup_friends)
        self.update_status()

    # Loading

    def show_error(self, title: str, error: Exception) -> None:
        """Log an error and show it in a blocking notice."""
        logger.error(f"{title}: {error}")
        details = ""
        if isinstance(error, ImportFailed):
            details = f"The current {error.kind} was kept."
        self.push_screen(NoticeModal(title=title, message=str(error), details=details, error=True))

    def load_config(self, path: Path) -> bool:
        """Load a settings file, keeping the current one on failure."""
        try:
            config = self.session.load_config_file(path)
        except ImportFailed as e:
            self.show_error("Error parsing YAML file", e)
            return False

        if self.settings_panel:
            self.settings_panel.show_config(config)
        self.call_later(self.refresh_friends)
        self.notify(f"Loaded configuration from {path.name}", timeout=2)
        self.update_status()
        return True

    async def load_friends(self, path: Path) -> bool:
        """Load a friends file, keeping the current list on failure."""
        try:
            friends = self.session.load_friends_file(path)
        except ImportFailed as e:
            self.show_error("Error parsing JSON file", e)
            return False

        if self.search_bar:
            self.search_bar.set_friend_count(len(friends))
        await self.refresh_friends()
        self.notify(f"Loaded {len(friends)} friends", timeout=2)
        return True

    async def refresh_friends(self) -> None:
        """Recompute the filtered list and redraw it."""
        if self.friends_panel:
            await self.friends_panel.show_friends(
                len(self.session.friends),
                self.session.visible_friends,
                self.session.config,
            )
        self.update_status()

    def update_status(self) -> None:
        if not self.status_bar:
            return
        source = self.session.config_source
        self.status_bar.update_context(source.name if source else None)
        self.status_bar.update_counts(
            len(self.session.friends),
            len(self.session.visible_friends),
            self.session.filter_mode,
        )

    # Actions

    def action_load_config(self) -> None:
        current = str(self.session.config_source or "")

        def on_path(path: Optional[Path]) -> None:
            if path:
                self.load_config(path)

        self.push_screen(
            PathModal("Load Configuration (YAML)", hint="Accepts .yaml or .yml", current=current),
            on_path,
        )

    def action_load_friends(self) -> None:
        current = str(self.session.friends_source or "")

        async def on_path(path: Optional[Path]) -> None:
            if path:
                await self.load_friends(path)

        self.push_screen(
            PathModal("Load Friends List (JSON)", hint="Accepts .json", current=current),
            on_path,
        )

    def action_save_config(self) -> None:
        """Export the settings document as configuration.yaml."""
        try:
            output_path = self.session.export()
        except NothingToExportError as e:
            logger.warning(str(e))
            self.push_screen(NoticeModal(title="Nothing to export", message=str(e)))
            return
        except ExportError as e:
            self.show_error("Failed to save configuration file", e)
            return

        self.notify(f"Configuration saved as {output_path}", timeout=4)
        if self.status_bar:
            self.status_bar.show_message(f"Saved {output_path.name}")

    def action_search(self) -> None:
        if self.search_bar:
            self.search_bar.focus_search()

    async def action_cycle_filter(self) -> None:
        mode = self.session.cycle_filter()
        if self.search_bar:
            self.search_bar.set_mode(mode)
        await self.refresh_friends()

    def action_blur(self) -> None:
        self.set_focus(None)

    # Messages from widgets

    async def on_search_changed(self, message: SearchChanged) -> None:
        self.session.search_text = message.text
        await self.refresh_friends()

    async def on_filter_changed(self, message: FilterChanged) -> None:
        self.session.filter_mode = message.mode
        await self.refresh_friends()

    def on_field_changed(self, message: FieldChanged) -> None:
        try:
            config = self.session.update_field(message.path, message.value)
        except ConfigFieldError as e:
            logger.error(f"Ignoring edit: {e}")
            return
        if self.settings_panel:
            self.settings_panel.show_read_only(config)

    async def on_watch_toggled(self, message: WatchToggled) -> None:
        if self.session.config.is_watched(message.nsa_id) == message.watched:
            return
        config = self.session.toggle_watched(message.nsa_id, message.watched)
        if self.settings_panel:
            self.settings_panel.show_read_only(config)
        if self.session.filter_mode == FilterMode.WATCHED:
            await self.refresh_friends()

    async def on_alias_edited(self, message: AliasEdited) -> None:
        changed = self.session.config.alias_for(message.nsa_id) != message.alias.strip()
        if changed:
            config = self.session.set_alias(message.nsa_id, message.alias)
            if self.settings_panel:
                self.settings_panel.show_read_only(config)
        # Redrawing while typing would steal focus from the field
        if message.final and self.session.filter_mode == FilterMode.HAS_ALIAS:
            await self.refresh_friends()
