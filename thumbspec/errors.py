"""
Exceptions raised while building thumbnail specifications.
"""


class ThumbnailError(ValueError):
    """Base class for thumbnail specification errors."""


class InvalidTimeFormat(ThumbnailError):
    """Raised when a sample time does not match HH:MM:SS."""


class InvalidType(ThumbnailError):
    """Raised when an unsupported output type is requested."""


class ThumbnailConfigError(ThumbnailError):
    """Raised when the configuration cannot produce an output."""
