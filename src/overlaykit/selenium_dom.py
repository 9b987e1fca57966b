from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys

from .dom import ESCAPE
from .errors import StaleReferenceError

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement

T = TypeVar("T")

_KEYS = {
    ESCAPE: Keys.ESCAPE,
}


def _translate_stale(action: Callable[[], T]) -> T:
    try:
        return action()
    except StaleElementReferenceException as exc:
        raise StaleReferenceError(exc.msg or "Element is no longer attached to the DOM.") from exc


class SeleniumDomElement:
    def __init__(self, element: WebElement, driver: WebDriver) -> None:
        self.element = element
        self.driver = driver

    def get_attribute(self, name: str) -> str | None:
        return _translate_stale(lambda: self.element.get_attribute(name))

    def is_displayed(self) -> bool:
        return bool(_translate_stale(self.element.is_displayed))

    def click(self) -> None:
        _translate_stale(self.element.click)

    def hover(self) -> None:
        _translate_stale(lambda: ActionChains(self.driver).move_to_element(self.element).perform())

    @property
    def text(self) -> str:
        return _translate_stale(lambda: self.element.text) or ""

    def find_by_class(self, css_class: str) -> list[SeleniumDomElement]:
        found = _translate_stale(lambda: self.element.find_elements(By.CLASS_NAME, css_class))
        return [SeleniumDomElement(item, self.driver) for item in found]

    def __repr__(self) -> str:
        return f"SeleniumDomElement({self.element!r})"


class SeleniumDomDriver:
    """DOM capability backed by a Selenium ``WebDriver``."""

    def __init__(self, driver: WebDriver) -> None:
        self.driver = driver

    def find_children(self, absolute_path: str) -> list[SeleniumDomElement]:
        found = self.driver.find_elements(By.XPATH, f"{absolute_path.rstrip('/')}/*")
        return [SeleniumDomElement(item, self.driver) for item in found]

    def send_key(self, key: str) -> None:
        ActionChains(self.driver).send_keys(_KEYS.get(key, key)).perform()
