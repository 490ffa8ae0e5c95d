import importlib
import logging

import pytest

import admissions.settings as settings


@pytest.fixture
def reload_settings(monkeypatch):
    """Reload settings under a patched environment, then put it back."""

    def _reload(value):
        if value is None:
            monkeypatch.delenv("ADMISSIONS_CAPACITY", raising=False)
        else:
            monkeypatch.setenv("ADMISSIONS_CAPACITY", value)
        return importlib.reload(settings)

    yield _reload
    monkeypatch.undo()
    importlib.reload(settings)


def test_capacity_env_override(reload_settings):
    assert reload_settings("3").DEFAULT_CAPACITY == 3


def test_capacity_defaults_when_unset(reload_settings):
    assert reload_settings(None).DEFAULT_CAPACITY == 16


@pytest.mark.parametrize("value", ["abc", "0", "-4", ""])
def test_invalid_capacity_env_falls_back(reload_settings, value):
    assert reload_settings(value).DEFAULT_CAPACITY == 16


@pytest.mark.parametrize("verbose, level", [(True, logging.DEBUG), (False, logging.WARNING)])
def test_configure_logging_level(monkeypatch, verbose, level):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    settings.configure_logging(verbose)
    assert calls == [{"level": level, "format": settings.LOG_FORMAT}]
