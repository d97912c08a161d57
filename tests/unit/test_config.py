"""Unit tests for settings."""

import pytest

from docfork.config import Settings
from docfork.domain.value_objects import DisposalPolicy


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.forkable_kind_list == ["post", "page"]
    assert settings.merge_action is DisposalPolicy.LOCK
    assert settings.strict_empty_base is False


def test_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORKABLE_KINDS", "post, article ,")
    monkeypatch.setenv("MERGE_ACTION", "delete")
    monkeypatch.setenv("STRICT_EMPTY_BASE", "true")

    settings = Settings(_env_file=None)

    assert settings.forkable_kind_list == ["post", "article"]
    assert settings.merge_action is DisposalPolicy.DELETE
    assert settings.strict_empty_base is True
