from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from pkgbuild_meta.config import BuildMetaConfig


def write_descriptor(root: Path, **fields: Any) -> Path:
    payload = {"name": "demo", "version": "1.0.0"}
    payload.update(fields)
    path = root / "package.json"
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


@pytest.fixture()
def project(tmp_path: Path) -> BuildMetaConfig:
    write_descriptor(tmp_path)
    return BuildMetaConfig.from_project(
        tmp_path,
        dependencies=["a@1.0.0"],
        homepage_url="https://x",
    )
