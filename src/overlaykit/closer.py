from __future__ import annotations

import logging

from selenium.webdriver.support.ui import WebDriverWait

from .dom import ESCAPE, DomDriver
from .errors import ConfigurationError, StaleReferenceError
from .finder import KindFilter, OverlayFinder
from .models import OverlayHandle

DEFAULT_POLL_INTERVAL = 0.05


class OverlayCloser:
    """Dismisses overlays with the ESCAPE key.

    The key goes to whatever currently has focus, which is normally inside the
    open overlay, rather than to the overlay element itself.
    """

    def __init__(self, driver: DomDriver, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        if driver is None:
            raise ConfigurationError("OverlayCloser requires a driver.")
        if poll_interval <= 0:
            raise ConfigurationError(f"poll_interval must be positive, got {poll_interval!r}.")
        self.driver = driver
        self.poll_interval = poll_interval
        self.logger = logging.getLogger("overlaykit.closer")

    def close(self, handle: OverlayHandle, max_wait_ms: int | None = None) -> None:
        """Sends ESCAPE and, when ``max_wait_ms`` is positive, waits until the
        overlay is hidden or detached.

        Raises ``selenium.common.exceptions.TimeoutException`` when the overlay
        is still displayed after ``max_wait_ms``.
        """
        if max_wait_ms is not None and max_wait_ms < 0:
            raise ValueError(f"max_wait_ms must not be negative, got {max_wait_ms!r}.")

        self.driver.send_key(ESCAPE)
        if not max_wait_ms:
            return

        wait = WebDriverWait(self.driver, max_wait_ms / 1000, poll_frequency=self.poll_interval)
        wait.until(
            lambda _driver: self._is_closed(handle),
            f"Overlay {handle.class_attribute!r} still displayed after {max_wait_ms} ms.",
        )

    def close_top(
        self,
        finder: OverlayFinder,
        kind: KindFilter = None,
        max_wait_ms: int | None = None,
    ) -> OverlayHandle | None:
        handle = finder.find_top_visible_overlay(kind)
        if handle is None:
            self.logger.debug("No visible overlay to close.")
            return None
        self.close(handle, max_wait_ms)
        return handle

    def _is_closed(self, handle: OverlayHandle) -> bool:
        try:
            return not handle.is_displayed()
        except StaleReferenceError:
            # Detached from the DOM: the overlay is gone.
            self.logger.debug("Overlay %r detached while closing.", handle.class_attribute)
            return True
