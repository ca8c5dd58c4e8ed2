import logging

import pytest
from pydantic import ValidationError

from gridlattice import KernelSettings, configure, get_settings, load_settings, reset_settings


@pytest.fixture(autouse=True)
def _default_settings():
    reset_settings()
    yield
    reset_settings()


def test_defaults():
    assert get_settings() == KernelSettings()
    assert get_settings().smooth_line_step == 8


def test_configure_replaces_settings():
    updated = configure(smooth_line_step=4)
    assert updated.smooth_line_step == 4
    assert get_settings() is updated
    assert reset_settings().smooth_line_step == 8


@pytest.mark.parametrize("overrides", [{"smooth_line_step": 0}, {"smooth_line_step": "fast"}, {"unknown": 1}])
def test_configure_validates(overrides: dict):
    with pytest.raises(ValidationError):
        configure(**overrides)
    assert get_settings() == KernelSettings()


def test_settings_are_frozen():
    with pytest.raises(ValidationError):
        get_settings().smooth_line_step = 3  # type: ignore[misc]


def test_configure_logs_at_debug(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="gridlattice.config"):
        configure(smooth_line_step=2)
    assert "kernel settings replaced" in caplog.text


def test_load_settings_from_toml(tmp_path):
    path = tmp_path / "lattice.toml"
    path.write_text("[gridlattice]\nsmooth_line_step = 5\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.smooth_line_step == 5
    assert get_settings().smooth_line_step == 8


def test_load_settings_without_table_uses_defaults(tmp_path):
    path = tmp_path / "other.toml"
    path.write_text("[tool]\nname = \"x\"\n", encoding="utf-8")
    assert load_settings(path) == KernelSettings()


def test_load_settings_rejects_non_table(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("gridlattice = 3\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_settings(path)


def test_load_settings_rejects_invalid_values(tmp_path):
    path = tmp_path / "invalid.toml"
    path.write_text("[gridlattice]\nsmooth_line_step = -2\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(path)
