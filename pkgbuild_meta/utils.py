"""Shared file helpers used by the metadata writers."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .errors import FileSystemError


def ensure_dir(path: Path) -> Path:
    """Create ``path`` and any missing parents."""

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileSystemError(f"Unable to create directory {path}: {exc}", path=path) from exc
    return path


def write_text(path: Path, content: str) -> None:
    """Write text to file ensuring parent directories exist."""

    ensure_dir(path.parent)
    try:
        path.write_text(content, encoding="utf-8", newline="")
    except OSError as exc:
        raise FileSystemError(f"Unable to write {path}: {exc}", path=path) from exc


def append_text(path: Path, content: str) -> None:
    try:
        with path.open("a", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise FileSystemError(f"Unable to append to {path}: {exc}", path=path) from exc


def read_text(path: Path, *, errors: str = "strict") -> str:
    """Read UTF-8 text without newline translation."""

    try:
        return read_bytes(path).decode("utf-8", errors=errors)
    except UnicodeDecodeError as exc:
        raise FileSystemError(f"{path} is not valid UTF-8: {exc}", path=path) from exc


def read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileSystemError(f"Unable to read {path}: {exc}", path=path) from exc


def timestamp_millis(moment: Optional[datetime] = None) -> int:
    """Return ``moment`` (default: now) as integer milliseconds since the epoch."""

    moment = moment or datetime.now(timezone.utc)
    return int(moment.timestamp() * 1000)
