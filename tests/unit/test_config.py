"""Tests for environment-driven configuration."""

import importlib

import pytest

from romanus.common import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config after changing the environment, restoring it afterwards."""
    monkeypatch.delenv("ROMANUS_DEBUG", raising=False)
    monkeypatch.delenv("ROMANUS_NO_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config) -> None:
    reload_config()
    assert config.ROMANUS_DEBUG is False
    assert config.ROMANUS_NO_COLOR is False


def test_debug_enabled(reload_config, monkeypatch) -> None:
    monkeypatch.setenv("ROMANUS_DEBUG", "1")
    reload_config()
    assert config.ROMANUS_DEBUG is True


@pytest.mark.parametrize(
    "name, value, expected",
    [
        ("ROMANUS_NO_COLOR", "1", True),
        ("ROMANUS_NO_COLOR", "0", False),
        ("NO_COLOR", "1", True),
        ("NO_COLOR", "yes", True),
        ("NO_COLOR", "", False),
    ],
)
def test_no_color(reload_config, monkeypatch, name, value, expected) -> None:
    monkeypatch.setenv(name, value)
    reload_config()
    assert config.ROMANUS_NO_COLOR is expected
