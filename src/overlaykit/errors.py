from __future__ import annotations


class OverlayError(Exception):
    """Base class for errors raised by overlaykit."""


class ConfigurationError(OverlayError, ValueError):
    pass


class StaleReferenceError(OverlayError):
    """The element handle outlived its DOM node."""


class MenuItemNotFoundError(OverlayError, LookupError):
    pass


class NoSuchMonthError(OverlayError, LookupError):
    pass
