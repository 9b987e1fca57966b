from __future__ import annotations

from dataclasses import asdict, dataclass, fields
import json
from pathlib import Path
import tempfile
from typing import Any, Literal, Union

from .catalog import (
    ANTD_OVERLAY_KINDS,
    MAT_OVERLAY_KINDS,
    MUI_OVERLAY_KINDS,
    OverlayCatalog,
    kebab_suffix,
    root_suffix,
)
from .errors import ConfigurationError

CONFIG_DIR = Path.home() / ".overlaykit"
CONFIG_PATH = CONFIG_DIR / "config.json"

DEFAULT_OVERLAY_PATH = "/html/body"
DEFAULT_ANTD_POPUP_PATH = "/html/body/div"

FrameworkName = Literal["mui", "mat", "antd"]


def _require_prefix(owner: str, name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise ConfigurationError(f"{owner}.{name} must be a string, got {value!r}.")


def _require_absolute_path(owner: str, name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{owner}.{name} is required.")
    if not value.startswith("/"):
        raise ConfigurationError(f"{owner}.{name} must be an absolute XPath, got {value!r}.")
    if value != "/" and value.endswith("/"):
        raise ConfigurationError(f"{owner}.{name} must not end with '/', got {value!r}.")


@dataclass(frozen=True, slots=True)
class MuiConfig:
    """Material-UI settings.

    Overlays (Popover, Menu, Dialog, Drawer) are rendered as direct children of
    ``overlay_absolute_path``; their root carries ``{css_prefix}{Name}-root``.
    """

    css_prefix: str = "Mui"
    overlay_absolute_path: str = DEFAULT_OVERLAY_PATH

    def __post_init__(self) -> None:
        _require_prefix("MuiConfig", "css_prefix", self.css_prefix)
        _require_absolute_path("MuiConfig", "overlay_absolute_path", self.overlay_absolute_path)

    @property
    def overlay_mount_path(self) -> str:
        return self.overlay_absolute_path

    def root_css(self, component_name: str) -> str:
        return self.overlay_catalog().marker_for(component_name)

    def overlay_catalog(self) -> OverlayCatalog:
        return OverlayCatalog(self.css_prefix, MUI_OVERLAY_KINDS, root_suffix)


@dataclass(frozen=True, slots=True)
class MatConfig:
    """Angular Material settings. Overlays live inside ``cdk-overlay-container``."""

    css_prefix: str = "mat-"
    cdk_prefix: str = "cdk-"
    overlay_absolute_path: str = DEFAULT_OVERLAY_PATH

    def __post_init__(self) -> None:
        for name in ("css_prefix", "cdk_prefix"):
            _require_prefix("MatConfig", name, getattr(self, name))
        _require_absolute_path("MatConfig", "overlay_absolute_path", self.overlay_absolute_path)

    @property
    def overlay_mount_path(self) -> str:
        return self.overlay_absolute_path

    def overlay_catalog(self) -> OverlayCatalog:
        return OverlayCatalog(self.cdk_prefix, MAT_OVERLAY_KINDS, kebab_suffix)

    def cdk_css(self, name: str) -> str:
        return f"{self.cdk_prefix}{name}"

    def mat_css(self, name: str) -> str:
        return f"{self.css_prefix}{name}"


@dataclass(frozen=True, slots=True)
class AntdConfig:
    """Ant Design settings, aligned with ConfigProvider's ``prefixCls`` and
    ``getPopupContainer``.

    Popups are rendered inside an unclassed ``div`` that Ant Design appends to
    body, so the default mount path is those wrappers: ``/html/body/div/*``
    yields every popup root in document order.
    """

    prefix_cls: str = "ant"
    popup_container_path: str = DEFAULT_ANTD_POPUP_PATH

    def __post_init__(self) -> None:
        _require_prefix("AntdConfig", "prefix_cls", self.prefix_cls)
        _require_absolute_path("AntdConfig", "popup_container_path", self.popup_container_path)

    @property
    def overlay_mount_path(self) -> str:
        return self.popup_container_path

    def overlay_catalog(self) -> OverlayCatalog:
        return OverlayCatalog(f"{self.prefix_cls}-", ANTD_OVERLAY_KINDS, kebab_suffix)


FrameworkConfig = Union[MuiConfig, MatConfig, AntdConfig]

_CONFIG_TYPES: dict[str, type] = {
    "mui": MuiConfig,
    "mat": MatConfig,
    "antd": AntdConfig,
}


def _config_type(framework: str) -> type:
    try:
        return _CONFIG_TYPES[framework]
    except KeyError:
        known = ", ".join(sorted(_CONFIG_TYPES))
        raise ConfigurationError(f"Unknown framework {framework!r}; expected one of: {known}.") from None


def load_framework_config(framework: FrameworkName, config_path: Path | None = None) -> FrameworkConfig:
    """Reads the ``framework`` section of the JSON config file.

    A missing or unreadable file gives the defaults. Values that are present
    but invalid raise ``ConfigurationError``.
    """
    config_type = _config_type(framework)
    path = config_path or CONFIG_PATH
    if not path.exists() or not path.is_file():
        return config_type()

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, TypeError):
        return config_type()

    if not isinstance(payload, dict):
        return config_type()

    section = payload.get(framework, {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"Config section {framework!r} must be an object.")

    allowed = {item.name for item in fields(config_type)}
    unknown = sorted(set(section) - allowed)
    if unknown:
        raise ConfigurationError(f"Unknown {framework} config keys: {', '.join(unknown)}.")
    return config_type(**section)


def save_framework_config(
    framework: FrameworkName,
    config: FrameworkConfig,
    config_path: Path | None = None,
) -> tuple[bool, str | None]:
    if not isinstance(config, _config_type(framework)):
        raise ConfigurationError(f"{type(config).__name__} cannot be saved as {framework!r}.")

    path = config_path or CONFIG_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return False, f"Could not create config folder: {exc}"

    payload: dict[str, Any] = {}
    if path.is_file():
        try:
            existing = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            existing = None
        if isinstance(existing, dict):
            payload.update(existing)
    payload[framework] = asdict(config)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            handle.write(json.dumps(payload, ensure_ascii=True, indent=2, sort_keys=True))
            handle.flush()
            temp_path = Path(handle.name)
        temp_path.replace(path)
    except OSError as exc:
        if temp_path and temp_path.exists():
            temp_path.unlink(missing_ok=True)
        return False, f"Could not write overlay config: {exc}"

    return True, None
