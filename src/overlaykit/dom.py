from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

ESCAPE = "Escape"

CLASS_ATTRIBUTE = "class"


@runtime_checkable
class DomElement(Protocol):
    def get_attribute(self, name: str) -> str | None: ...

    def is_displayed(self) -> bool: ...

    def click(self) -> None: ...

    def hover(self) -> None: ...

    @property
    def text(self) -> str: ...

    def find_by_class(self, css_class: str) -> list[DomElement]: ...


@runtime_checkable
class DomDriver(Protocol):
    def find_children(self, absolute_path: str) -> list[DomElement]: ...

    def send_key(self, key: str) -> None: ...


def class_tokens(raw: Sequence[str] | str | Any) -> list[str]:
    """Split a class attribute into unique tokens, keeping their order.

    Anything that is not a string (or a sequence of strings) yields no tokens,
    so a missing or malformed attribute never matches a marker.
    """
    if not raw:
        return []
    if isinstance(raw, str):
        items = raw.split()
    elif isinstance(raw, (list, tuple)):
        items = [item for item in raw if isinstance(item, str)]
    else:
        return []

    seen: set[str] = set()
    tokens: list[str] = []
    for item in items:
        clean = item.strip()
        if not clean or clean in seen:
            continue
        seen.add(clean)
        tokens.append(clean)
    return tokens


def has_class(element: DomElement, css_class: str) -> bool:
    return css_class in class_tokens(element.get_attribute(CLASS_ATTRIBUTE))
