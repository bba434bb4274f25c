"""TV channel definitions and band classification."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class Band(Enum):
    """Broadcast band a channel frequency falls into."""
    VHF_LOW = "VHF_LOW"
    VHF_HIGH = "VHF_HIGH"
    UHF = "UHF"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value


# Inclusive frequency ranges in MHz
BAND_RANGES: Dict[Band, Tuple[int, int]] = {
    Band.VHF_LOW: (54, 88),
    Band.VHF_HIGH: (174, 216),
    Band.UHF: (470, 608),
}


class InvalidFrequency(ValueError):
    """Raised when a channel frequency is not an int inside a TV band."""

    def __init__(self, frequency: int):
        self.frequency = frequency
        super().__init__(f"Invalid frequency: {frequency!r} MHz is not a whole MHz value inside the TV bands.")


def band_for_frequency(frequency: int) -> Band:
    """Return the band containing the frequency, or UNKNOWN."""
    for band, (low, high) in BAND_RANGES.items():
        if low <= frequency <= high:
            return band
    return Band.UNKNOWN


@dataclass(eq=False)
class Channel:
    """Represents a TV channel with its name and frequency.

    Name and frequency are fixed once the channel exists; only the
    favorite flag changes, through toggle_favorite().
    """
    name: str
    frequency: int  # in MHz
    favorite: bool = field(default=False, init=False)

    def __post_init__(self):
        if (not isinstance(self.frequency, int) or isinstance(self.frequency, bool)
                or band_for_frequency(self.frequency) is Band.UNKNOWN):
            raise InvalidFrequency(self.frequency)

    def __setattr__(self, key, value):
        if key in ("name", "frequency") and key in self.__dict__:
            raise AttributeError(f"Channel.{key} is read-only")
        super().__setattr__(key, value)

    @property
    def band(self) -> Band:
        return band_for_frequency(self.frequency)

    def toggle_favorite(self) -> None:
        self.favorite = not self.favorite

    def describe(self) -> str:
        return (f"Channel[name={self.name}, frequency={self.frequency} MHz, "
                f"band={self.band}, favorite={self.favorite}]")

    def __str__(self) -> str:
        return self.describe()
