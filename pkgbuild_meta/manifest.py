"""Per-version manifest of the scripts a build emitted."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence

from .config import SCRIPT_EXTENSION, DistLayout
from .schemas.build import Manifest
from .utils import ensure_dir, read_text, timestamp_millis, write_text

logger = logging.getLogger(__name__)


def load_manifest(path: Path) -> Manifest:
    """Load a manifest from JSON."""

    payload = json.loads(read_text(path))
    return Manifest.model_validate(payload)


def dump_manifest(manifest: Manifest, path: Path) -> None:
    """Write a manifest to disk."""

    write_text(path, manifest.model_dump_json(indent=2, by_alias=True) + "\n")


def chunk_assets(report: Mapping[str, object]) -> List[str]:
    """Flatten an ``assetsByChunkName`` mapping into one list of filenames.

    Accepts either the mapping itself or a stats JSON document that carries it
    under ``assetsByChunkName``.
    """

    chunks = report.get("assetsByChunkName", report)
    if not isinstance(chunks, Mapping):
        raise TypeError(f"assetsByChunkName must be a mapping, got {type(chunks).__name__}")

    files: List[str] = []
    for assets in chunks.values():
        if isinstance(assets, str):
            files.append(assets)
        else:
            files.extend(assets)
    return files


def script_basenames(files: Iterable[str], extension: str = SCRIPT_EXTENSION) -> List[str]:
    # Bundler names may use either separator regardless of host OS.
    return [name.replace("\\", "/").rsplit("/", 1)[-1] for name in files if name.endswith(extension)]


class ManifestBuilder:
    """Writes ``<dist>/<version>/meta.json`` after each completed build."""

    def __init__(self, layout: DistLayout, *, script_extension: str = SCRIPT_EXTENSION) -> None:
        self.layout = layout
        self.script_extension = script_extension

    def build_manifest(
        self,
        asset_report: Mapping[str, object],
        dependencies: Sequence[str],
        version: str,
        *,
        built_at: Optional[datetime] = None,
    ) -> Manifest:
        files = script_basenames(chunk_assets(asset_report), self.script_extension)
        manifest = Manifest(
            files=files,
            version=version,
            dependencies=list(dependencies),
            build_timestamp_millis=timestamp_millis(built_at),
        )

        ensure_dir(self.layout.version_dir(version))
        dump_manifest(manifest, self.layout.manifest_path(version))
        logger.info("Wrote meta.json")
        return manifest
