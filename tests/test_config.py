"""Tests store settings."""
from __future__ import annotations

import pytest
from pydantic import ValidationError
from typing import Generator
from notestore import StoreSettings, create_store, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NOTESTORE_INIT_ACTION_TYPE", raising=False)
    monkeypatch.delenv("NOTESTORE_THREAD_SAFE", raising=False)
    monkeypatch.delenv("NOTESTORE_LOG_ACTIONS", raising=False)

    subject = StoreSettings()

    assert subject.init_action_type == "@@init"
    assert subject.thread_safe is True
    assert subject.log_actions is False


def test_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOTESTORE_INIT_ACTION_TYPE", "@@start")
    monkeypatch.setenv("NOTESTORE_THREAD_SAFE", "false")
    monkeypatch.setenv("NOTESTORE_LOG_ACTIONS", "true")

    subject = get_settings()

    assert subject == StoreSettings(
        init_action_type="@@start",
        thread_safe=False,
        log_actions=True,
    )
    assert get_settings() is subject


def test_store_uses_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOTESTORE_INIT_ACTION_TYPE", "@@start")
    actions = []

    def _reducer(state: object, action: object) -> int:
        actions.append(action)
        return 0

    create_store(_reducer)

    assert actions == [{"type": "@@start"}]


def test_settings_are_frozen() -> None:
    subject = StoreSettings()

    with pytest.raises(ValidationError):
        subject.thread_safe = False  # type: ignore[misc]
