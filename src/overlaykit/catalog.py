from __future__ import annotations

from dataclasses import dataclass, replace
import re
from typing import Callable, Iterable

from .models import OverlayKind

SuffixRule = Callable[[str], str]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def root_suffix(name: str) -> str:
    return f"{name}-root"


def kebab_suffix(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("-", name.strip()).lower()


@dataclass(frozen=True, slots=True)
class OverlayCatalog:
    """Maps overlay kinds to the CSS class marking their root element."""

    prefix: str
    kinds: tuple[OverlayKind, ...]
    fallback_suffix: SuffixRule = root_suffix

    def kind(self, name: str) -> OverlayKind | None:
        for kind in self.kinds:
            if kind.name == name:
                return kind
        return None

    def marker_for(self, kind_or_name: OverlayKind | str) -> str:
        if isinstance(kind_or_name, OverlayKind):
            return self.prefix + kind_or_name.suffix
        if kind_or_name is None or not isinstance(kind_or_name, str) or not kind_or_name.strip():
            raise ValueError(f"Overlay kind name is required, got {kind_or_name!r}.")

        name = kind_or_name.strip()
        known = self.kind(name)
        if known is not None:
            return self.prefix + known.suffix
        return self.prefix + self.fallback_suffix(name)

    def markers_for(self, kinds: OverlayKind | str | Iterable[OverlayKind | str]) -> frozenset[str]:
        if isinstance(kinds, (OverlayKind, str)):
            return frozenset({self.marker_for(kinds)})
        return frozenset(self.marker_for(item) for item in kinds)

    def all_known_markers(self) -> frozenset[str]:
        return frozenset(self.prefix + kind.suffix for kind in self.kinds)

    def with_kind(self, name: str, suffix: str) -> OverlayCatalog:
        if not name or not suffix:
            raise ValueError("Custom overlay kinds need both a name and a suffix.")
        kinds = tuple(kind for kind in self.kinds if kind.name != name)
        return replace(self, kinds=kinds + (OverlayKind(name, suffix),))


MUI_OVERLAY_KINDS = (
    OverlayKind("Popover", "Popover-root"),
    OverlayKind("Menu", "Menu-root"),
    OverlayKind("Dialog", "Dialog-root"),
    OverlayKind("Drawer", "Drawer-root"),
)

MAT_OVERLAY_KINDS = (OverlayKind("OverlayContainer", "overlay-container"),)

ANTD_OVERLAY_KINDS = (
    OverlayKind("Modal", "modal-root"),
    OverlayKind("Drawer", "drawer"),
    OverlayKind("Dropdown", "dropdown"),
    OverlayKind("Popover", "popover"),
    OverlayKind("SelectDropdown", "select-dropdown"),
    OverlayKind("PickerDropdown", "picker-dropdown"),
    OverlayKind("Tooltip", "tooltip"),
)
