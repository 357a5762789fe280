"""Framing failure on the message stream."""


class FramingError(ValueError):
    """Raised when a header block has no usable Content-Length."""
