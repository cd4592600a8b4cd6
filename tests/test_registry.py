from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from pkgbuild_meta.config import DistLayout
from pkgbuild_meta.registry import RegistryDescriptorBuilder, load_registry_descriptor
from pkgbuild_meta.schemas.build import ProjectDescriptor


def _read(layout: DistLayout) -> dict:
    return json.loads(layout.registry_path.read_text(encoding="utf-8"))


def test_registry_descriptor_defaults_missing_fields(tmp_path: Path) -> None:
    layout = DistLayout(tmp_path / "dist")
    descriptor = ProjectDescriptor(name="demo", version="1.0.0")

    registry = RegistryDescriptorBuilder(layout).build_descriptor(
        descriptor,
        "https://x",
        None,
        built_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )

    payload = _read(layout)
    assert payload == {
        "latest_version": "1.0.0",
        "latest_timestamp": 1735689600000,
        "type": "program",
        "description": "",
        "author": "",
        "license": "",
        "repo_url": "",
        "homepage_url": "https://x",
    }
    assert "long_desc" not in payload
    assert registry.long_description is None


def test_registry_descriptor_embeds_readme_verbatim(tmp_path: Path) -> None:
    layout = DistLayout(tmp_path / "dist")
    descriptor = ProjectDescriptor(
        name="demo",
        version="2.0.0",
        description="Demo",
        author="Ada",
        license="MIT",
        repository_url="https://git.example.com/demo.git",
    )
    readme = "# Demo\r\n\nUnicode: é中\n  trailing spaces  "

    RegistryDescriptorBuilder(layout).build_descriptor(descriptor, "https://demo.dev", readme)

    payload = _read(layout)
    assert payload["long_desc"] == readme
    assert payload["repo_url"] == "https://git.example.com/demo.git"
    assert payload["author"] == "Ada"
    assert load_registry_descriptor(layout.registry_path).long_description == readme


def test_registry_descriptor_reflects_only_latest_build(tmp_path: Path) -> None:
    layout = DistLayout(tmp_path / "dist")
    builder = RegistryDescriptorBuilder(layout)

    builder.build_descriptor(ProjectDescriptor(name="demo", version="1.0.0"), "https://x", "readme")
    builder.build_descriptor(ProjectDescriptor(name="demo", version="1.1.0"), "https://x", None)

    payload = _read(layout)
    assert payload["latest_version"] == "1.1.0"
    assert "long_desc" not in payload
