"""Error kinds raised by the filters and the image loader."""


class FilterLabError(Exception):
    """Base class for all filter lab errors."""


class ImageNotFoundError(FilterLabError, FileNotFoundError):
    """Image path does not exist."""


class ImageDecodeError(FilterLabError, ValueError):
    """File exists but could not be decoded as an image."""


class InvalidParameterError(FilterLabError, ValueError):
    """Filter parameter or input array is out of range."""
