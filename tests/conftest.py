"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from datemask.engine import EditEvent, MaskEngine, MaskState, index_to_utf16_offset, time_engine
from datemask.formats import Format


@pytest.fixture
def date_engine() -> MaskEngine:
    """A day/month/year engine with the default '.' separator."""
    return MaskEngine(Format.DAY_MONTH_YEAR, ".")


@pytest.fixture
def clock_engine() -> MaskEngine:
    """An hour/minute engine with the default ':' separator."""
    return time_engine()


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch) -> Path:
    """Point datemask's config file at a temporary location."""
    path = tmp_path / ".config" / "datemask" / "config.toml"
    monkeypatch.setattr("datemask.config._CONFIG_PATH", path)
    return path


def type_keys(engine: MaskEngine, keys: str, text: str = "") -> str:
    """Type *keys* one at a time at the end of *text* and return the result."""
    for key in keys:
        end = index_to_utf16_offset(text, len(text))
        outcome = engine.handle_edit(MaskState(text), EditEvent(end, 0, key))
        text = outcome.state.text
    return text
