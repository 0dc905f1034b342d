from __future__ import annotations

import pytest

from nestlink.config import ConfigurationError, get_source_config


def test_default_system_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NESTLINK_SOURCE_SYSTEM", " PRD ")

    assert get_source_config().default_system == "PRD"


def test_default_system_absent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NESTLINK_SOURCE_SYSTEM", "")

    assert get_source_config().default_system is None


def test_overlong_system_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NESTLINK_SOURCE_SYSTEM", "PROD")

    with pytest.raises(ConfigurationError, match="NESTLINK_SOURCE_SYSTEM"):
        get_source_config()
