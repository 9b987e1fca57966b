import json

import pytest

from overlaykit.config import (
    AntdConfig,
    MatConfig,
    MuiConfig,
    load_framework_config,
    save_framework_config,
)
from overlaykit.errors import ConfigurationError


def test_defaults() -> None:
    assert MuiConfig().overlay_mount_path == "/html/body"
    assert MatConfig().overlay_mount_path == "/html/body"
    assert AntdConfig().overlay_mount_path == "/html/body/div"
    assert MuiConfig().root_css("Button") == "MuiButton-root"
    assert MatConfig().cdk_css("overlay-pane") == "cdk-overlay-pane"


@pytest.mark.parametrize("path", [None, "", "   ", "html/body", "/html/body/"])
def test_invalid_mount_path_fails_at_construction(path: object) -> None:
    with pytest.raises(ConfigurationError):
        MuiConfig(overlay_absolute_path=path)  # type: ignore[arg-type]
    with pytest.raises(ConfigurationError):
        AntdConfig(popup_container_path=path)  # type: ignore[arg-type]


def test_prefix_must_be_string() -> None:
    with pytest.raises(ConfigurationError):
        MuiConfig(css_prefix=None)  # type: ignore[arg-type]
    with pytest.raises(ConfigurationError):
        MatConfig(cdk_prefix=3)  # type: ignore[arg-type]


def test_configs_compare_by_value() -> None:
    assert MuiConfig() == MuiConfig()
    assert MuiConfig(css_prefix="X") != MuiConfig()


def test_load_returns_defaults_when_file_missing(tmp_path) -> None:
    assert load_framework_config("mui", tmp_path / "missing.json") == MuiConfig()


def test_load_returns_defaults_for_unreadable_json(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")
    assert load_framework_config("antd", path) == AntdConfig()


def test_load_reads_framework_section(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"mui": {"css_prefix": "Acme", "overlay_absolute_path": "/html/body/div"}}),
        encoding="utf-8",
    )

    config = load_framework_config("mui", path)

    assert config == MuiConfig(css_prefix="Acme", overlay_absolute_path="/html/body/div")
    assert load_framework_config("mat", path) == MatConfig()


def test_load_rejects_invalid_values(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"mat": {"overlay_absolute_path": "body"}}), encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_framework_config("mat", path)

    path.write_text(json.dumps({"mat": {"unknown": 1}}), encoding="utf-8")
    with pytest.raises(ConfigurationError, match="unknown"):
        load_framework_config("mat", path)


def test_load_rejects_falsy_non_object_section(tmp_path) -> None:
    path = tmp_path / "config.json"
    for section in ([], "", 0):
        path.write_text(json.dumps({"antd": section}), encoding="utf-8")
        with pytest.raises(ConfigurationError, match="must be an object"):
            load_framework_config("antd", path)


def test_load_rejects_unknown_framework(tmp_path) -> None:
    with pytest.raises(ConfigurationError):
        load_framework_config("vue", tmp_path / "config.json")  # type: ignore[arg-type]


def test_save_then_load_keeps_other_sections(tmp_path) -> None:
    path = tmp_path / "nested" / "config.json"

    assert save_framework_config("mui", MuiConfig(css_prefix="Acme"), path) == (True, None)
    assert save_framework_config("antd", AntdConfig(prefix_cls="my"), path) == (True, None)

    assert load_framework_config("mui", path) == MuiConfig(css_prefix="Acme")
    assert load_framework_config("antd", path) == AntdConfig(prefix_cls="my")
    assert not list(path.parent.glob("*.tmp"))


def test_save_rejects_mismatched_config(tmp_path) -> None:
    with pytest.raises(ConfigurationError):
        save_framework_config("mat", MuiConfig(), tmp_path / "config.json")
