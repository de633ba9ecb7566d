"""Shared fixtures for boxtable tests."""

from __future__ import annotations

import os
from typing import List

import pytest


def value_column(count: int = 5) -> List[str]:
    """['Value 1', ..., 'Value N'] as used by the sample tables."""
    return [f"Value {i}" for i in range(1, count + 1)]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Run in an empty directory with no BOXTABLE_* variables set."""
    for key in list(os.environ):
        if key.startswith("BOXTABLE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BOXTABLE_HISTORY_FILE_PATH", str(tmp_path / "history"))
    return tmp_path
