from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from playwright.sync_api import Error as PlaywrightError

from .errors import StaleReferenceError

if TYPE_CHECKING:
    from playwright.sync_api import ElementHandle, Page

T = TypeVar("T")

_DETACHED_ERROR_HINTS = (
    "not attached to the dom",
    "element is detached",
    "element handle is disposed",
)


def _is_detached_error(exc: Exception) -> bool:
    message = str(exc).lower()
    return any(hint in message for hint in _DETACHED_ERROR_HINTS)


def _translate_stale(action: Callable[[], T]) -> T:
    try:
        return action()
    except PlaywrightError as exc:
        if _is_detached_error(exc):
            raise StaleReferenceError(str(exc)) from exc
        raise


class PlaywrightDomElement:
    def __init__(self, handle: ElementHandle) -> None:
        self.handle = handle

    def get_attribute(self, name: str) -> str | None:
        return _translate_stale(lambda: self.handle.get_attribute(name))

    def is_displayed(self) -> bool:
        return bool(_translate_stale(self.handle.is_visible))

    def click(self) -> None:
        _translate_stale(self.handle.click)

    def hover(self) -> None:
        _translate_stale(self.handle.hover)

    @property
    def text(self) -> str:
        return _translate_stale(self.handle.inner_text) or ""

    def find_by_class(self, css_class: str) -> list[PlaywrightDomElement]:
        found = _translate_stale(lambda: self.handle.query_selector_all(f".{css_class}"))
        return [PlaywrightDomElement(item) for item in found]

    def __repr__(self) -> str:
        return f"PlaywrightDomElement({self.handle!r})"


class PlaywrightDomDriver:
    """DOM capability backed by a Playwright sync ``Page``."""

    def __init__(self, page: Page) -> None:
        self.page = page

    def find_children(self, absolute_path: str) -> list[PlaywrightDomElement]:
        found = self.page.query_selector_all(f"xpath={absolute_path.rstrip('/')}/*")
        return [PlaywrightDomElement(item) for item in found]

    def send_key(self, key: str) -> None:
        self.page.keyboard.press(key)
