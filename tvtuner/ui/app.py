from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Header, Footer, Static, Input, Button, DataTable
from textual.reactive import reactive
from pathlib import Path
from typing import Optional
import datetime
import logging

from ..core.channels import Channel, InvalidFrequency
from ..core.tuner import DuplicateFrequencyPolicy, TunerRegistry
from .styles import TV_APP_CSS

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: Path = Path("logs")) -> Path:
    """Log to a timestamped file under log_dir and to the console."""
    log_dir.mkdir(exist_ok=True)
    log_file = log_dir / f"tvtuner_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )
    return log_file


class TVApp(App):
    """Textual TUI Application for managing the television channel list."""

    CSS = TV_APP_CSS
    TITLE = "Television Channel List"

    BINDINGS = [
        ("q", "quit_app", "Quit"),
        ("f", "toggle_favorite", "Toggle Favorite"),
        ("r", "factory_reset", "Factory Reset"),
    ]

    status_line = reactive("Welcome! Select a channel or enter a position to tune.", init=False)

    def __init__(self, duplicate_policy: DuplicateFrequencyPolicy = DuplicateFrequencyPolicy.ALLOW,
                 *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.registry = TunerRegistry(duplicate_policy=duplicate_policy)
        self.registry.set_status_updater(self._set_status_line)
        logging.info("TV app initialized")

    def compose(self) -> ComposeResult:
        """Create child widgets for the app's layout."""
        yield Header()
        with Vertical(id="main_container"):
            yield Static(id="status_display", markup=False)
            yield Static(id="summary_display", markup=False)
            with Horizontal(id="position_area"):
                yield Input(placeholder="Position (e.g., 3)", id="position_input", type="integer")
                yield Button("Tune", id="tune_button", variant="primary")
                yield Button("Favorite", id="favorite_button", variant="primary")
                yield Button("Remove", id="remove_button", variant="error")
            with Horizontal(id="swap_area"):
                yield Input(placeholder="Swap with position", id="swap_input", type="integer")
                yield Button("Swap", id="swap_button", variant="primary")
            with Horizontal(id="search_area"):
                yield Input(placeholder="Channel name", id="search_input")
                yield Button("Find", id="find_button", variant="primary")
            with Horizontal(id="add_area"):
                yield Input(placeholder="New channel name", id="name_input")
                yield Input(placeholder="Frequency (MHz, e.g., 480)", id="freq_input", type="integer")
                yield Button("Add", id="add_button", variant="primary")
            yield DataTable(id="channels_table", zebra_stripes=True, cursor_type="row")
        yield Footer()

    def on_mount(self) -> None:
        """Called when the app is first mounted."""
        self.query_one("#status_display", Static).update(self.status_line)
        table = self.query_one("#channels_table", DataTable)
        table.add_columns("#", "Channel", "Frequency", "Band", "Favorite", "Tuned")
        self._update_channel_list()

    def _update_channel_list(self):
        """Rebuild the channels table and the summary line."""
        table = self.query_one("#channels_table", DataTable)
        table.clear()
        current = self.registry.current_position
        for position, channel in enumerate(self.registry.get_all_channels()):
            table.add_row(
                str(position + 1),
                channel.name,
                f"{channel.frequency} MHz",
                str(channel.band),
                "*" if channel.favorite else "",
                ">" if position == current else "",
            )
        if current is not None:
            table.move_cursor(row=current)
        self.query_one("#summary_display", Static).update(self.registry.summary())

    def _set_status_line(self, message: str):
        self.status_line = message

    def watch_status_line(self, new_status: str) -> None:
        status_widget = self.query_one("#status_display", Static)
        status_widget.update(new_status)

    def _read_position(self, input_id: str) -> Optional[int]:
        """Parse a 1-based position typed by the user into a list index."""
        value = self.query_one(input_id, Input).value.strip()
        try:
            return int(value) - 1
        except ValueError:
            self.status_line = f"Invalid position '{value}'. Please enter a number."
            return None

    def action_tune(self) -> None:
        position = self._read_position("#position_input")
        if position is None:
            return
        if not self.registry.tune(position):
            self.status_line = f"No channel at position {position + 1}."
        self._update_channel_list()

    def action_toggle_favorite(self) -> None:
        if not self.registry.toggle_favorite():
            self.status_line = "Tune to a channel before marking a favorite."
        self._update_channel_list()

    def action_remove(self) -> None:
        position = self._read_position("#position_input")
        if position is None:
            return
        if not self.registry.remove(position):
            self.status_line = f"No channel at position {position + 1}."
        self._update_channel_list()

    def action_swap(self) -> None:
        first = self._read_position("#position_input")
        second = self._read_position("#swap_input")
        if first is None or second is None:
            return
        if not self.registry.swap(first, second):
            self.status_line = f"Cannot swap positions {first + 1} and {second + 1}."
        self._update_channel_list()

    def action_find(self) -> None:
        query = self.query_one("#search_input", Input).value
        position = self.registry.find_by_name(query)
        if position is None:
            self.status_line = f"No channel matching '{query}'."
            return
        self.query_one("#position_input", Input).value = str(position + 1)
        self.query_one("#channels_table", DataTable).move_cursor(row=position)
        self.status_line = f"Found {self.registry.get_channel(position).name} at position {position + 1}."

    def action_add(self) -> None:
        name = self.query_one("#name_input", Input).value
        freq_text = self.query_one("#freq_input", Input).value
        try:
            channel = Channel(name, int(freq_text))
        except InvalidFrequency as e:
            self.status_line = str(e)
            logging.error(str(e))
            return
        except ValueError:
            self.status_line = "Invalid frequency format. Please use whole MHz (e.g., 480)."
            return
        if not self.registry.add(channel):
            logging.warning(f"Channel {name} not added")
        self._update_channel_list()

    def action_factory_reset(self) -> None:
        self.registry.reset_to_factory()
        self._update_channel_list()

    def action_quit_app(self) -> None:
        """Called when 'q' is pressed or quit is triggered."""
        logging.info("Shutting down")
        self.exit("Channel list closed.")

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Tune to the channel selected in the table."""
        if self.registry.tune(event.cursor_row):
            self.query_one("#position_input", Input).value = str(event.cursor_row + 1)
            self._update_channel_list()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press events."""
        if event.button.id == "tune_button":
            self.action_tune()
        elif event.button.id == "favorite_button":
            self.action_toggle_favorite()
        elif event.button.id == "remove_button":
            self.action_remove()
        elif event.button.id == "swap_button":
            self.action_swap()
        elif event.button.id == "find_button":
            self.action_find()
        elif event.button.id == "add_button":
            self.action_add()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in the input fields."""
        if event.input.id == "position_input":
            self.action_tune()
        elif event.input.id == "search_input":
            self.action_find()
        elif event.input.id == "freq_input":
            self.action_add()
