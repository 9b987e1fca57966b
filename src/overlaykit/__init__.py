"""Locate and dismiss the overlays that MUI, Angular Material and Ant Design
mount at the document root."""

from __future__ import annotations

from .catalog import OverlayCatalog
from .closer import OverlayCloser
from .config import AntdConfig, MatConfig, MuiConfig, load_framework_config, save_framework_config
from .dom import ESCAPE, DomDriver, DomElement, class_tokens
from .errors import (
    ConfigurationError,
    MenuItemNotFoundError,
    NoSuchMonthError,
    OverlayError,
    StaleReferenceError,
)
from .finder import OverlayFinder
from .menu import MatMenu, MatMenuFinder, MatMenuItem
from .models import OverlayHandle, OverlayKind

__version__ = "0.1.0"

__all__ = [
    "AntdConfig",
    "ConfigurationError",
    "DomDriver",
    "DomElement",
    "ESCAPE",
    "MatConfig",
    "MatMenu",
    "MatMenuFinder",
    "MatMenuItem",
    "MenuItemNotFoundError",
    "MuiConfig",
    "NoSuchMonthError",
    "OverlayCatalog",
    "OverlayCloser",
    "OverlayError",
    "OverlayFinder",
    "OverlayHandle",
    "OverlayKind",
    "StaleReferenceError",
    "class_tokens",
    "load_framework_config",
    "save_framework_config",
]
