"""Small value components: spatial cells, RGB color samples, and keyed lookups."""

from .color import ColorSample
from .directory import KeyedLookup
from .errors import ChannelOutOfRangeError, DirectoryLoadError, InvalidDimensionError, RefkitError
from .outcome import Found, NotFound, Outcome
from .spatial import SpatialCell

__all__ = [
    "ChannelOutOfRangeError",
    "ColorSample",
    "DirectoryLoadError",
    "Found",
    "InvalidDimensionError",
    "KeyedLookup",
    "NotFound",
    "Outcome",
    "RefkitError",
    "SpatialCell",
]
