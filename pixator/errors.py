"""
Error kinds raised by the stripe renderer.

Both kinds derive from ``ValueError`` so callers that already treat bad input
as a ``ValueError`` (for example an HTTP layer answering with a 4xx status)
keep working without knowing about this module.
"""


class PixatorError(ValueError):
    """Base class for every error raised by pixator."""


class InvalidArgumentError(PixatorError):
    """A width, height, column count, seed or mode is not usable."""


class InvalidRangeError(PixatorError):
    """A random bound was requested with ``max_exclusive <= min_inclusive``."""
