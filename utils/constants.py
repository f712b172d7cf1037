"""Constants for Chemion glasses designer"""
from enum import Enum
from typing import Dict, FrozenSet, Tuple

# Physical LED matrix dimensions
GRID_ROWS = 9
GRID_COLUMNS = 24

# Pixels missing around the nose bridge
NOSE_CUTOUT: FrozenSet[Tuple[int, int]] = frozenset({
    (7, 11),
    (7, 12),
    (8, 10),
    (8, 11),
    (8, 12),
    (8, 13),
})


class Intensity(str, Enum):
    """Brightness levels a single pixel can take, dimmest first"""
    OFF = "Off"
    QUARTER = "Quarter"
    MID = "Mid"
    FULL = "Full"

    @property
    def rank(self) -> int:
        """Position in the OFF < QUARTER < MID < FULL order"""
        return list(Intensity).index(self)

    def __lt__(self, other):
        if not isinstance(other, Intensity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Intensity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Intensity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Intensity):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value) -> "Intensity":
        """Get intensity from a member, its name or its label"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            for member in cls:
                if key in (member.name, member.value.upper()):
                    return member
        raise ValueError(f"Unknown intensity: {value!r}")


class ConnectionState(str, Enum):
    """Connection states for the glasses session"""
    DISCONNECTED = "Disconnected"
    CONNECTED = "Connected"


class StateColors:
    """Color definitions for different states"""
    SUCCESS = "green"
    WARNING = "yellow"
    ERROR = "red"
    INFO = "blue"
    NEUTRAL = "grey70"
    HIGHLIGHT = "cyan"


class PixelColors:
    """Preview colors matching the web designer palette"""
    LEVELS: Dict[Intensity, str] = {
        Intensity.FULL: "#ffffff",
        Intensity.MID: "#669999",
        Intensity.QUARTER: "#334d4d",
        Intensity.OFF: "#000000",
    }
    DISABLED = "grey23"


class StateDisplay:
    """Display information for session states"""
    CONNECTION_STATES = {
        ConnectionState.CONNECTED: StateColors.SUCCESS,
        ConnectionState.DISCONNECTED: StateColors.ERROR,
    }


class ENDPOINTS:
    """Paths of the glasses web service"""
    DISCOVER = "/discover"
    CONNECT = "/connect"
    DISCONNECT = "/disconnect"
    ENCODE = "/encode"
    DISPLAY = "/display"
