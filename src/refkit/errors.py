"""Exception types raised by refkit value constructors and loaders."""


class RefkitError(Exception):
    """Base class for all refkit failures."""


class InvalidDimensionError(RefkitError, ValueError):
    """Raised when a spatial cell is given a non-positive width or height."""


class ChannelOutOfRangeError(RefkitError, ValueError):
    """Raised when a color channel is not an integer in [0, 255]."""


class DirectoryLoadError(RefkitError, RuntimeError):
    """Raised when a lookup directory file cannot be read or parsed."""
