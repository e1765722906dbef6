"""Fixed-channel RGB color values and luma conversion."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import ChannelOutOfRangeError

CHANNEL_MIN = 0
CHANNEL_MAX = 255

# Rec. 601 luma weights.
RED_WEIGHT = 0.299
GREEN_WEIGHT = 0.587
BLUE_WEIGHT = 0.114

HEX_PAT = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def _check_channel(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ChannelOutOfRangeError(f"{name} channel must be an integer, got {value!r}")
    if not CHANNEL_MIN <= value <= CHANNEL_MAX:
        raise ChannelOutOfRangeError(
            f"{name} channel must be within [{CHANNEL_MIN}, {CHANNEL_MAX}], got {value}"
        )


@dataclass(frozen=True, slots=True)
class ColorSample:
    """Immutable 8-bit RGB triplet."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_channel("red", self.red)
        _check_channel("green", self.green)
        _check_channel("blue", self.blue)

    @classmethod
    def from_hex(cls, text: str) -> ColorSample:
        """Parse ``#rrggbb`` or ``rrggbb``.

        Text that does not encode three hex channels raises ``ChannelOutOfRangeError``.
        """
        match = HEX_PAT.fullmatch(text.strip())
        if not match:
            raise ChannelOutOfRangeError(f"Cannot parse red, green, blue channels from {text!r}; expected #rrggbb")
        red, green, blue = (int(part, 16) for part in match.groups())
        return cls(red=red, green=green, blue=blue)

    def to_luminance(self) -> float:
        return RED_WEIGHT * self.red + GREEN_WEIGHT * self.green + BLUE_WEIGHT * self.blue

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)
