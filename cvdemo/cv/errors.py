"""Exceptions raised by the capture and writer helpers."""


class VideoIOError(Exception):
    """Base class for video source/sink failures."""
    pass


class CaptureError(VideoIOError):
    """Raised when a capture source cannot be opened."""
    pass


class WriterError(VideoIOError):
    """Raised when an output container cannot be opened."""
    pass


class FourCCError(ValueError):
    """Raised for codec identifiers that are not four characters long."""
    pass
