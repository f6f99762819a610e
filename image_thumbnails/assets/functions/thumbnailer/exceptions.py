class ThumbnailError(Exception):
    """Base class for errors raised while generating thumbnails."""


class SizingError(ThumbnailError, ValueError):
    """Raised when a target width cannot produce a smaller, non-empty thumbnail."""


class ImageDecodeError(ThumbnailError):
    """Raised when the source bytes cannot be decoded as an image."""


class EventError(ThumbnailError, ValueError):
    """Raised when an event or blob URL is malformed."""


class ImageEncodeError(ThumbnailError):
    """Raised when a resized image cannot be written in the source's format."""
