"""
Exceptions for the frames SDK.
"""


class FramesError(Exception):
    """Base exception for all frames SDK errors."""
    pass


class MessageDecodeError(FramesError):
    """Raised when trusted data cannot be decoded into a frame action message."""
    pass


class InvalidFrameMessageError(FramesError):
    """Raised by callers when the hub reports the frame message as invalid."""
    pass
