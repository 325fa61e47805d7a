"""Thin filesystem helpers. OS errors propagate unchanged."""

from __future__ import annotations

import os
from pathlib import Path


def modified_time(path: str | Path) -> int:
    """Get a file's modification time in Unix seconds."""
    return int(os.stat(path).st_mtime)


def rename(path: str | Path, to: str | Path) -> None:
    os.rename(path, to)


def destroy(path: str | Path) -> None:
    os.remove(path)
