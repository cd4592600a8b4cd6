"""Project descriptor loading and change detection across watch rebuilds."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .config import DEFAULT_README_CANDIDATES, DistLayout
from .errors import DescriptorParseError
from .schemas.build import ProjectDescriptor
from .utils import ensure_dir, read_bytes, read_text

logger = logging.getLogger(__name__)


def parse_descriptor(raw: bytes, *, path: Optional[Path] = None) -> ProjectDescriptor:
    """Parse raw ``package.json`` bytes into a descriptor snapshot."""

    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DescriptorParseError(f"Invalid project descriptor at {path}: {exc}", path=path) from exc
    if not isinstance(payload, dict):
        raise DescriptorParseError(
            f"Invalid project descriptor at {path}: expected an object, got {type(payload).__name__}",
            path=path,
        )
    try:
        return ProjectDescriptor.model_validate(payload)
    except ValidationError as exc:
        raise DescriptorParseError(f"Invalid project descriptor at {path}: {exc}", path=path) from exc


def find_readme(project_root: Path, candidates: Sequence[str] = DEFAULT_README_CANDIDATES) -> Optional[str]:
    """Return the contents of the first README candidate that exists, else ``None``."""

    for name in candidates:
        path = project_root / name
        if path.is_file():
            return read_text(path, errors="replace")
    return None


class ProjectDescriptorStore:
    """Owns the cached descriptor snapshot and its raw bytes.

    A reload that fails to parse keeps the last good snapshot: the error is
    logged and kept on ``last_error`` until a later load succeeds.
    """

    def __init__(self, path: Path, layout: DistLayout) -> None:
        self.path = path
        self.layout = layout
        self.last_error: Optional[DescriptorParseError] = None
        self._raw: Optional[bytes] = None
        self._descriptor: Optional[ProjectDescriptor] = None

    @property
    def descriptor(self) -> ProjectDescriptor:
        if self._descriptor is None:
            raise RuntimeError("Project descriptor has not been loaded.")
        return self._descriptor

    @property
    def version(self) -> str:
        return self.descriptor.version

    def load(self) -> ProjectDescriptor:
        """Read and parse the descriptor; parse failures propagate."""

        raw = read_bytes(self.path)
        descriptor = parse_descriptor(raw, path=self.path)
        self._raw, self._descriptor = raw, descriptor
        self.last_error = None
        return descriptor

    def refresh_if_changed(self) -> bool:
        """Reload the descriptor when its bytes changed; return whether it did."""

        if self._descriptor is None:
            self.load()
            ensure_dir(self.layout.version_dir(self.version))
            return True

        raw = read_bytes(self.path)
        if raw == self._raw:
            return False

        try:
            descriptor = parse_descriptor(raw, path=self.path)
        except DescriptorParseError as exc:
            self.last_error = exc
            logger.error("%s; keeping version %s", exc, self._descriptor.version)
            return False

        logger.info("package.json changed, updating")
        self._raw, self._descriptor = raw, descriptor
        self.last_error = None
        ensure_dir(self.layout.version_dir(descriptor.version))
        return True
