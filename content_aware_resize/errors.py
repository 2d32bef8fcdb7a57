"""Exceptions raised by content-aware resizing."""


class ResizeError(Exception):
    """Base class for resizing failures."""


class InvalidArgumentError(ResizeError, ValueError):
    """Raised for a bad target width, buffer geometry or seam."""


class UnsupportedOperationError(ResizeError, NotImplementedError):
    """Raised when a resize would need seam insertion (upsizing)."""
