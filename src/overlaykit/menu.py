from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Callable

from selenium.webdriver.support.ui import WebDriverWait

from .config import MatConfig
from .dom import DomDriver, DomElement
from .errors import MenuItemNotFoundError
from .finder import OverlayFinder

MenuItemPredicate = Callable[["MatMenuItem"], bool]

DEFAULT_POLL_INTERVAL = 0.05


@dataclass(frozen=True, slots=True)
class MatMenuItem:
    element: DomElement

    @property
    def text(self) -> str:
        return (self.element.text or "").strip()

    def click(self) -> None:
        self.element.click()

    def hover(self) -> None:
        self.element.hover()


@dataclass(frozen=True, slots=True)
class MatMenu:
    panel: DomElement
    config: MatConfig

    def menu_items(self) -> list[MatMenuItem]:
        return [MatMenuItem(item) for item in self.panel.find_by_class(self.config.mat_css("menu-item"))]


class MatMenuFinder:
    """Resolves the menu panel opened last inside the CDK overlay container."""

    def __init__(
        self,
        driver: DomDriver,
        config: MatConfig,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.overlay_finder = OverlayFinder(driver, config)
        self.driver = driver
        self.config = config
        self.poll_interval = poll_interval
        self._sleep = sleep
        self.logger = logging.getLogger("overlaykit.menu")

    def find_top_menu(self, delay_ms: int) -> MatMenu:
        """Waits up to ``delay_ms`` for an expanded menu and returns the top one."""
        wait = WebDriverWait(self.driver, delay_ms / 1000, poll_frequency=self.poll_interval)
        return wait.until(lambda _driver: self._try_find_top_menu(), "No expanded menu found.")

    def navigate_menu_items(self, gap_ms: int, delay_ms: int, *menu_texts: str) -> None:
        predicates = [lambda item, expected=text: item.text == expected for text in menu_texts]
        self.navigate_menu_items_matching(gap_ms, delay_ms, predicates)

    def navigate_menu_items_matching(
        self,
        gap_ms: int,
        delay_ms: int,
        predicates: list[MenuItemPredicate],
    ) -> None:
        for step, predicate in enumerate(predicates):
            items = self.find_top_menu(delay_ms).menu_items()
            item = next((candidate for candidate in items if predicate(candidate)), None)
            if item is None:
                raise MenuItemNotFoundError(f"Menu item not found at step {step + 1}.")
            self.logger.debug("Moving to menu item %r.", item.text)
            item.hover()
            self._sleep(gap_ms / 1000)

    def _try_find_top_menu(self) -> MatMenu | None:
        container = self.overlay_finder.find_top_visible_overlay()
        if container is None:
            return None
        boxes = container.element.find_by_class(self.config.cdk_css("overlay-connected-position-bounding-box"))
        if not boxes:
            return None
        panels = boxes[-1].find_by_class(self.config.mat_css("menu-panel"))
        if not panels:
            return None
        return MatMenu(panels[0], self.config)
