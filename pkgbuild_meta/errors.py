"""Exceptions raised by the build-metadata tooling."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class BuildMetaError(RuntimeError):
    """Base class for build-metadata failures."""


class DescriptorParseError(BuildMetaError):
    """Raised when the project descriptor is not a valid document."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class FileSystemError(BuildMetaError):
    """Raised when an output directory or artifact cannot be read or written."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class LifecycleOrderError(BuildMetaError):
    """Raised when a lifecycle phase fires out of order."""
