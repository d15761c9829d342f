"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging

import pytest

from music_catalog.config import get_log_level


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        (" error ", logging.ERROR),
        ("", logging.INFO),
        ("LOUD", logging.INFO),
    ],
)
def test_log_level_from_env(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int
) -> None:
    monkeypatch.setenv("MUSIC_CATALOG_LOG_LEVEL", value)
    assert get_log_level() == expected


def test_log_level_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MUSIC_CATALOG_LOG_LEVEL", raising=False)
    assert get_log_level() == logging.INFO
