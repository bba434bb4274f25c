"""Channel list management for the television tuner."""

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .channels import Band, Channel

logger = logging.getLogger(__name__)

# Factory default channel set as (name, frequency in MHz), in slot order
FACTORY_CHANNELS: Tuple[Tuple[str, int], ...] = (
    ("RTP 1 HD", 54),
    ("CM TV HD", 62),
    ("SPORT.TV + HD", 78),
    ("Canal 11 HD", 86),
    ("Globo Portugal HD", 174),
    ("TVI Reality HD", 182),
    ("SIC Mulher HD", 190),
    ("SIC Caras HD", 198),
    ("SIC Radical HD", 206),
    ("Discovery Channel HD", 470),
)


class DuplicateFrequencyPolicy(Enum):
    """What add() does with a channel whose frequency is already listed."""
    ALLOW = "allow"
    REJECT = "reject"


class TunerRegistry:
    """
    Owns the ordered channel list and the currently tuned slot.
    Operations that take a position return False or None for an invalid
    position instead of raising.
    """

    def __init__(self, duplicate_policy: DuplicateFrequencyPolicy = DuplicateFrequencyPolicy.ALLOW):
        self.duplicate_policy = duplicate_policy
        self.channels: List[Channel] = []
        self._current_position: Optional[int] = None
        self.on_status_update = None  # Callback to report operation results
        self.reset_to_factory()

    def set_status_updater(self, updater_callback: Callable[[str], None]):
        """Sets the callback function for reporting operation results."""
        self.on_status_update = updater_callback

    def _update_status(self, message: str):
        """Helper to call the status update callback if it's set."""
        if self.on_status_update:
            self.on_status_update(message)

    def _is_position_valid(self, position: int) -> bool:
        return 0 <= position < len(self.channels)

    def __len__(self) -> int:
        return len(self.channels)

    def count(self) -> int:
        """Number of channels currently in the list."""
        return len(self.channels)

    @property
    def current_position(self) -> Optional[int]:
        return self._current_position

    def is_tuned(self) -> bool:
        return self._current_position is not None

    def current_channel(self) -> Optional[Channel]:
        if self._current_position is None:
            return None
        return self.channels[self._current_position]

    def tune(self, position: int) -> bool:
        """Tune to the channel at position. Retuning the same slot succeeds."""
        if not self._is_position_valid(position):
            logger.warning(f"Cannot tune: position {position} out of range")
            return False
        self._current_position = position
        logger.info(f"Tuned to position {position}")
        self._update_status(f"Tuned to {position + 1}: {self.channels[position].name}")
        return True

    def toggle_favorite(self) -> bool:
        """Toggle the favorite flag of the tuned channel."""
        channel = self.current_channel()
        if channel is None:
            logger.warning("Cannot toggle favorite: not tuned")
            return False
        channel.toggle_favorite()
        logger.info(f"Toggled favorite on {channel}")
        state = "added to" if channel.favorite else "removed from"
        self._update_status(f"{channel.name} {state} favorites")
        return True

    def add(self, channel: Optional[Channel]) -> bool:
        """Append a channel to the end of the list."""
        if channel is None:
            return False
        if self.duplicate_policy is DuplicateFrequencyPolicy.REJECT:
            if any(c.frequency == channel.frequency for c in self.channels):
                logger.warning(f"Rejected {channel.name}: {channel.frequency} MHz already in use")
                self._update_status(f"Frequency {channel.frequency} MHz is already in use")
                return False
        self.channels.append(channel)
        logger.info(f"Added {channel}")
        self._update_status(f"Added {channel.name} at position {len(self.channels)}")
        return True

    def remove(self, position: int) -> bool:
        """
        Remove the channel at position. Removing the tuned slot untunes;
        removing an earlier slot keeps the same channel tuned.
        """
        if not self._is_position_valid(position):
            logger.warning(f"Cannot remove: position {position} out of range")
            return False
        removed = self.channels.pop(position)
        if self._current_position == position:
            self._current_position = None
        elif self._current_position is not None and self._current_position > position:
            self._current_position -= 1
        logger.info(f"Removed {removed}")
        self._update_status(f"Removed {removed.name}")
        return True

    def find_by_name(self, query: Optional[str]) -> Optional[int]:
        """Position of the first channel whose name contains query, ignoring case."""
        if query is None or not query.strip():
            return None
        query = query.lower()
        for position, channel in enumerate(self.channels):
            if query in channel.name.lower():
                return position
        return None

    def swap(self, position1: int, position2: int) -> bool:
        """
        Exchange two slots. Tuning is positional, so the tuned index stays
        put and now refers to whatever channel moved into it.
        """
        if not self._is_position_valid(position1) or not self._is_position_valid(position2):
            logger.warning(f"Cannot swap: positions {position1}, {position2} out of range")
            return False
        self.channels[position1], self.channels[position2] = (
            self.channels[position2], self.channels[position1])
        logger.info(f"Swapped positions {position1} and {position2}")
        self._update_status(f"Swapped positions {position1 + 1} and {position2 + 1}")
        return True

    def get_channel(self, position: int) -> Optional[Channel]:
        if not self._is_position_valid(position):
            return None
        return self.channels[position]

    def get_all_channels(self) -> List[Channel]:
        """Get all channels in slot order."""
        return list(self.channels)

    def get_channels_in_band(self, band: Band) -> List[Channel]:
        """Get all channels within a band."""
        return [c for c in self.channels if c.band is band]

    def get_favorites(self) -> List[Channel]:
        return [c for c in self.channels if c.favorite]

    def reset_to_factory(self) -> None:
        """Replace the list with fresh copies of the factory channels and untune."""
        self.channels = [Channel(name, frequency) for name, frequency in FACTORY_CHANNELS]
        self._current_position = None
        logger.info(f"Factory reset: {len(self.channels)} channels loaded")
        self._update_status("Factory settings restored")

    def summary(self) -> str:
        current = self.current_channel()
        return (f"Television[current_position={self._current_position}, "
                f"current_channel={current if current is not None else 'None'}, "
                f"number_channels={len(self.channels)}]")

    def channel_list(self) -> str:
        return "".join(f"{i:3d}. {channel}\n" for i, channel in enumerate(self.channels, start=1))

    def __str__(self) -> str:
        return self.summary()
