# topmark:header:start
#
#   project      : DiagRelay
#   file         : test_settings.py
#   file_relpath : tests/config/test_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the settings model, TOML loading and config discovery."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
import tomlkit

from diagrelay.config.errors import ConfigError
from diagrelay.config.loaders import discover_config_files, load_toml_dict
from diagrelay.config.model import MutableSettings, Settings
from diagrelay.config.policy import MutableWarningPolicy, WarningPolicy

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    """Frozen defaults match the documented runtime defaults."""
    settings: Settings = MutableSettings.from_defaults().freeze()
    assert settings == Settings()
    assert settings.product_name == "Build"
    assert settings.text_width == 77
    assert settings.policy == WarningPolicy()


def test_from_toml_dict_sets_only_present_keys() -> None:
    """Missing keys stay unset so lower layers are inherited."""
    m: MutableSettings = MutableSettings.from_toml_dict(
        {"warnings": {"suppress_dev_warnings": True}, "output": {"product_name": "Ninja"}}
    )
    assert m.policy == MutableWarningPolicy(suppress_dev_warnings=True)
    assert m.product_name == "Ninja"
    assert m.text_width is None


@pytest.mark.parametrize(
    "data",
    [
        {"warnings": "yes"},
        {"warnings": {"dev_warnings_as_errors": "true"}},
        {"output": {"text_width": 5}},
        {"output": {"text_width": True}},
        {"output": {"product_name": ""}},
        {"root": "yes"},
    ],
)
def test_invalid_values_raise(data: dict[str, object]) -> None:
    """Wrong types and out-of-range values raise ConfigError."""
    with pytest.raises(ConfigError):
        MutableSettings.from_toml_dict(data)


def test_unknown_keys_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are reported as warnings and otherwise ignored."""
    caplog.set_level(logging.WARNING)
    m: MutableSettings = MutableSettings.from_toml_dict(
        {"warnings": {"suppress_everything": True}, "colors": {}}
    )
    assert m.policy == MutableWarningPolicy()
    assert "suppress_everything" in caplog.text
    assert "colors" in caplog.text


def test_invalid_toml_raises_with_path(tmp_path: Path) -> None:
    """Malformed TOML surfaces as ConfigError naming the file."""
    bad: Path = _write(tmp_path / "diagrelay.toml", "[warnings\n")
    with pytest.raises(ConfigError) as excinfo:
        load_toml_dict(bad)
    assert excinfo.value.path == bad
    assert str(bad) in str(excinfo.value)


def test_pyproject_without_section_is_empty(tmp_path: Path) -> None:
    """A pyproject.toml without [tool.diagrelay] contributes nothing."""
    py: Path = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    m: MutableSettings = MutableSettings.from_toml_file(py)
    assert m.policy == MutableWarningPolicy()
    assert m.config_files == [py]


def test_pyproject_tool_section(tmp_path: Path) -> None:
    """Settings are read from [tool.diagrelay] in pyproject.toml."""
    py: Path = _write(
        tmp_path / "pyproject.toml",
        "[tool.diagrelay.warnings]\ndev_warnings_as_errors = true\n",
    )
    assert MutableSettings.from_toml_file(py).policy.dev_warnings_as_errors is True


def test_discovery_order_and_root_stop(tmp_path: Path) -> None:
    """Discovery lists root-most files first and stops at ``root = true``."""
    _write(tmp_path / "diagrelay.toml", "[output]\nproduct_name = 'Outside'\n")
    root_cfg: Path = _write(tmp_path / "repo" / "diagrelay.toml", "root = true\n")
    sub_py: Path = _write(
        tmp_path / "repo" / "sub" / "pyproject.toml",
        "[tool.diagrelay.output]\nproduct_name = 'Py'\n",
    )
    sub_cfg: Path = _write(
        tmp_path / "repo" / "sub" / "diagrelay.toml", "[output]\nproduct_name = 'Sub'\n"
    )

    found: list[Path] = discover_config_files(tmp_path / "repo" / "sub")

    assert found == [root_cfg.resolve(), sub_py.resolve(), sub_cfg.resolve()]


def test_discovery_skips_unparsable_candidates(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """A broken pyproject.toml found while walking upward is logged and skipped."""
    caplog.set_level(logging.WARNING)
    broken: Path = _write(tmp_path / "repo" / "pyproject.toml", '[project\nname = ')
    root_cfg: Path = _write(tmp_path / "repo" / "diagrelay.toml", "root = true\n")

    found: list[Path] = discover_config_files(tmp_path / "repo" / "sub")

    assert found == [root_cfg.resolve()]
    assert "Skipping config candidate" in caplog.text
    assert str(broken.resolve()) in caplog.text


def test_explicit_unparsable_config_still_fails(tmp_path: Path) -> None:
    """Only discovery is lenient; an explicit config path must parse."""
    broken: Path = _write(tmp_path / "pyproject.toml", '[project\nname = ')
    with pytest.raises(ConfigError):
        MutableSettings.load_merged(start=None, config_paths=[broken])


def test_discovery_rejects_non_boolean_root(tmp_path: Path) -> None:
    """``root`` must be a boolean; other values are not silently ignored."""
    _write(tmp_path / "repo" / "diagrelay.toml", "root = 'yes'\n")
    with pytest.raises(ConfigError, match="'root' must be a boolean"):
        discover_config_files(tmp_path / "repo")


def test_load_merged_precedence(tmp_path: Path) -> None:
    """Defaults < discovered < explicit < -W overlay."""
    _write(
        tmp_path / "diagrelay.toml",
        "root = true\n"
        "[warnings]\nsuppress_dev_warnings = true\ndev_warnings_as_errors = true\n"
        "[output]\nproduct_name = 'Found'\ntext_width = 60\n",
    )
    explicit: Path = _write(tmp_path / "extra" / "custom.toml", "[output]\nproduct_name = 'Mine'\n")

    settings: Settings = MutableSettings.load_merged(
        start=tmp_path,
        config_paths=[explicit],
        overlay_policy=MutableWarningPolicy(dev_warnings_as_errors=False),
    ).freeze()

    assert settings.product_name == "Mine"
    assert settings.text_width == 60
    assert settings.policy == WarningPolicy(suppress_dev_warnings=True)
    assert settings.config_files[-1] == explicit


def test_to_toml_round_trips(tmp_path: Path) -> None:
    """Rendered TOML loads back into equal settings."""
    settings = Settings(
        policy=WarningPolicy(deprecated_warnings_as_errors=True),
        product_name="Meson",
        text_width=50,
    )
    text: str = settings.to_toml()
    assert tomlkit.parse(text).unwrap()["output"] == {"product_name": "Meson", "text_width": 50}

    path: Path = _write(tmp_path / "diagrelay.toml", text)
    reloaded: Settings = MutableSettings.from_defaults().merge_with(
        MutableSettings.from_toml_file(path)
    ).freeze()
    assert reloaded.policy == settings.policy
    assert reloaded.product_name == "Meson"
    assert reloaded.text_width == 50
