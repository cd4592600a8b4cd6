"""Configuration handed to the external bundler for a program build."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import DistLayout
from .schemas.build import ProjectDescriptor

# Modules the host runtime provides; never bundled into a program.
BUILTIN_EXTERNALS: tuple[str, ...] = (
    "ollieos",
    "howler",
    "html-to-text",
    "sixel",
    "sweetalert2",
    "@xterm/xterm",
    "@xterm/addon-fit",
    "@xterm/addon-web-links",
    "@xterm/addon-image",
    "@xterm/link-provider",
)


class LoaderRule(BaseModel):
    test: str
    loader: str
    options: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class BundlerConfig(BaseModel):
    entry: Dict[str, str]
    devtool: str = "hidden-source-map"
    max_chunks: int = 1
    output_path: str
    output_filename: str
    source_map_filename: str
    library_type: str = "module"
    output_module: bool = True
    resolve_extensions: List[str] = Field(default_factory=lambda: [".ts", ".js"])
    rules: List[LoaderRule] = Field(default_factory=list)
    externals: Dict[str, str] = Field(default_factory=dict)
    watch_files: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase layout the bundler reads."""

        return {
            "entry": dict(self.entry),
            "devtool": self.devtool,
            "optimization": {"maxChunks": self.max_chunks},
            "output": {
                "path": self.output_path,
                "filename": self.output_filename,
                "sourceMapFilename": self.source_map_filename,
                "library": {"type": self.library_type},
            },
            "resolve": {"extensions": list(self.resolve_extensions)},
            "module": {"rules": [rule.model_dump() for rule in self.rules]},
            "externals": dict(self.externals),
            "experiments": {"outputModule": self.output_module},
            "watchFiles": list(self.watch_files),
        }


def build_bundler_config(
    programs: Mapping[str, str],
    descriptor: ProjectDescriptor,
    layout: DistLayout,
    externals: Optional[Mapping[str, str]] = None,
    *,
    descriptor_path: Optional[Path] = None,
) -> BundlerConfig:
    """Build the bundler input for ``programs`` (entry name -> source path)."""

    name, version = descriptor.name, descriptor.version
    # Bundler resolves the source map filename relative to the output path.
    maps = Path(os.path.relpath(layout.maps_dir, layout.root)).as_posix()
    merged_externals = dict(externals or {})
    merged_externals.update({module: module for module in BUILTIN_EXTERNALS})

    return BundlerConfig(
        entry=dict(programs),
        output_path=str(layout.root),
        output_filename=f"./{version}/{name}-[name]-{version}.js",
        source_map_filename=f"{maps}/{name}-[name]-{version}.js.map",
        rules=[
            LoaderRule(
                test=r"\.tsx?$",
                loader="ts-loader",
                options={"allowTsInNodeModules": True},
            )
        ],
        externals=merged_externals,
        watch_files=[str(descriptor_path)] if descriptor_path else [],
    )
