"""Local workspace: output directories and spec files on disk.

Creates models/ and every package folder up front, and reads/writes the
downloaded and converted spec files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .errors import FilesystemError


def prepare_workspace(root: Path, dirs: Iterable[str]) -> None:
    """Create each directory (and its parents) under *root*. Safe to repeat."""
    for rel in dirs:
        target = root / rel
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Could not create directory {target}: {exc}") from exc


def write_spec(path: Path, content: bytes) -> None:
    """Write *content* to *path*, replacing any existing file."""
    try:
        path.write_bytes(content)
    except OSError as exc:
        raise FilesystemError(f"Could not write {path}: {exc}") from exc


def read_spec(path: Path) -> bytes:
    """Load a previously downloaded spec from disk."""
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FilesystemError(f"Could not read {path}: {exc}") from exc


def is_non_empty_file(path: Path) -> bool:
    return path.is_file() and path.stat().st_size > 0
