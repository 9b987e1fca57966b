from __future__ import annotations

import logging
from typing import Iterable

from .catalog import OverlayCatalog
from .config import FrameworkConfig
from .dom import CLASS_ATTRIBUTE, DomDriver, class_tokens
from .errors import ConfigurationError
from .models import OverlayHandle, OverlayKind

KindFilter = OverlayKind | str | Iterable[OverlayKind | str] | None


class OverlayFinder:
    """Locates overlays that a framework mounts under its overlay root.

    Only direct children of the mount path are considered. Document order is
    preserved and the last visible overlay is treated as the topmost one; no
    stacking context (z-index) is consulted.
    """

    def __init__(self, driver: DomDriver, config: FrameworkConfig, catalog: OverlayCatalog | None = None) -> None:
        if driver is None:
            raise ConfigurationError("OverlayFinder requires a driver.")
        if config is None:
            raise ConfigurationError("OverlayFinder requires a framework config.")
        self.driver = driver
        self.config = config
        self.catalog = catalog or config.overlay_catalog()
        self.logger = logging.getLogger("overlaykit.finder")

    @property
    def mount_path(self) -> str:
        return self.config.overlay_mount_path

    def find_overlays(self, kind: KindFilter = None) -> list[OverlayHandle]:
        """All overlays, including the mounted-but-hidden ones (``keepMounted``)."""
        return self.find(self._markers(kind), include_hidden=True)

    def find_visible_overlays(self, kind: KindFilter = None) -> list[OverlayHandle]:
        return self.find(self._markers(kind), include_hidden=False)

    def find_top_visible_overlay(self, kind: KindFilter = None) -> OverlayHandle | None:
        overlays = self.find_visible_overlays(kind)
        return overlays[-1] if overlays else None

    def find(self, markers: frozenset[str] | None, include_hidden: bool) -> list[OverlayHandle]:
        if isinstance(markers, str):
            raise TypeError(f"markers must be a collection of class names, got the string {markers!r}.")
        wanted = self.catalog.all_known_markers() if markers is None else frozenset(markers)
        children = self.driver.find_children(self.mount_path)

        overlays: list[OverlayHandle] = []
        for rank, child in enumerate(children):
            raw_class = child.get_attribute(CLASS_ATTRIBUTE)
            class_attribute = raw_class if isinstance(raw_class, str) else ""
            matched = wanted.intersection(class_tokens(class_attribute))
            if not matched:
                continue
            if not include_hidden and not child.is_displayed():
                continue
            overlays.append(
                OverlayHandle(
                    element=child,
                    class_attribute=class_attribute,
                    rank=rank,
                    markers=frozenset(matched),
                )
            )

        self.logger.debug(
            "Overlay scan under %s: %d children, %d matched (include_hidden=%s).",
            self.mount_path,
            len(children),
            len(overlays),
            include_hidden,
        )
        return overlays

    def _markers(self, kind: KindFilter) -> frozenset[str] | None:
        if kind is None:
            return None
        return self.catalog.markers_for(kind)
