"""Configuration and output layout for a build session."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Tuple

DEFAULT_DIST_DIR = "dist"
DEFAULT_DESCRIPTOR = "package.json"
DEFAULT_README_CANDIDATES: Tuple[str, ...] = ("README", "README.txt", "README.md")
SCRIPT_EXTENSION = ".js"


@dataclass(frozen=True, slots=True)
class DistLayout:
    """Paths of every artifact written below the output root."""

    root: Path

    @property
    def versions_path(self) -> Path:
        return self.root / "versions.txt"

    @property
    def registry_path(self) -> Path:
        return self.root / "pkg.json"

    @property
    def maps_dir(self) -> Path:
        return self.root.parent / "maps"

    def version_dir(self, version: str) -> Path:
        return self.root / version

    def manifest_path(self, version: str) -> Path:
        return self.version_dir(version) / "meta.json"


@dataclass(slots=True)
class BuildMetaConfig:
    """Configuration describing one build session."""

    project_root: Path
    dist_dir: Path
    dependencies: Sequence[str] = field(default_factory=tuple)
    homepage_url: str = ""
    descriptor_filename: str = DEFAULT_DESCRIPTOR
    readme_candidates: Sequence[str] = DEFAULT_README_CANDIDATES
    script_extension: str = SCRIPT_EXTENSION

    @classmethod
    def from_project(
        cls,
        project_root: Optional[Path] = None,
        *,
        dependencies: Sequence[str] = (),
        homepage_url: str = "",
        dist: str = DEFAULT_DIST_DIR,
        descriptor: str = DEFAULT_DESCRIPTOR,
    ) -> "BuildMetaConfig":
        root = (project_root or Path.cwd()).resolve()
        return cls(
            project_root=root,
            dist_dir=(root / dist).resolve(),
            dependencies=tuple(dependencies),
            homepage_url=homepage_url,
            descriptor_filename=descriptor,
        )

    @property
    def descriptor_path(self) -> Path:
        return self.project_root / self.descriptor_filename

    @property
    def layout(self) -> DistLayout:
        return DistLayout(self.dist_dir)
