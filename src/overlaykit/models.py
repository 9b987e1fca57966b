from __future__ import annotations

from dataclasses import dataclass, field

from .dom import DomElement, class_tokens


@dataclass(frozen=True, slots=True)
class OverlayKind:
    name: str
    suffix: str


@dataclass(frozen=True, slots=True)
class OverlayHandle:
    """A located overlay root.

    ``class_attribute`` is the snapshot read during the scan that produced the
    handle. Visibility is never cached: ``is_displayed`` asks the element each
    time, and may raise ``StaleReferenceError`` once the node is gone.
    """

    element: DomElement
    class_attribute: str
    rank: int
    markers: frozenset[str] = field(default_factory=frozenset)

    @property
    def classes(self) -> list[str]:
        return class_tokens(self.class_attribute)

    @property
    def marker(self) -> str | None:
        for token in self.classes:
            if token in self.markers:
                return token
        return None

    def has_class(self, css_class: str) -> bool:
        return css_class in self.classes

    def is_displayed(self) -> bool:
        return bool(self.element.is_displayed())
