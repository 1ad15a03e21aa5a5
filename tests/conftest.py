"""Shared fixtures for file_extractor tests."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

import pytest

FIXED_TIME = datetime(2024, 1, 31, 23, 59, 59)


@pytest.fixture()
def fixed_clock():
    """Clock that always returns ``FIXED_TIME``."""
    return lambda: FIXED_TIME


@pytest.fixture()
def tree(tmp_path: Path) -> Path:
    """Empty scan root, kept apart from where reports are written."""
    root = tmp_path / "tree"
    root.mkdir()
    return root


@pytest.fixture()
def report_path(tmp_path: Path) -> Path:
    return tmp_path / "report.txt"


@pytest.fixture()
def symlink():
    """Factory creating ``link -> target``; skips where symlinks are unavailable."""

    def _make(link: Path, target: Path, *, target_is_directory: bool = False) -> Path:
        try:
            os.symlink(target, link, target_is_directory=target_is_directory)
        except (OSError, NotImplementedError) as exc:
            pytest.skip(f"symlinks not supported here: {exc}")
        return link

    return _make
