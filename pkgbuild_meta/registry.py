"""Latest-build descriptor consumed by the package registry."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import DistLayout
from .schemas.build import ProjectDescriptor, RegistryDescriptor
from .utils import read_text, timestamp_millis, write_text

logger = logging.getLogger(__name__)


def load_registry_descriptor(path: Path) -> RegistryDescriptor:
    payload = json.loads(read_text(path))
    return RegistryDescriptor.model_validate(payload)


class RegistryDescriptorBuilder:
    """Overwrites ``<dist>/pkg.json`` so it always describes the latest build."""

    def __init__(self, layout: DistLayout) -> None:
        self.layout = layout

    def build_descriptor(
        self,
        descriptor: ProjectDescriptor,
        homepage_url: str,
        readme_content: Optional[str],
        *,
        built_at: Optional[datetime] = None,
    ) -> RegistryDescriptor:
        registry = RegistryDescriptor(
            latest_version=descriptor.version,
            latest_timestamp_millis=timestamp_millis(built_at),
            description=descriptor.description or "",
            author=descriptor.author or "",
            license=descriptor.license or "",
            repository_url=descriptor.repository_url or "",
            homepage_url=homepage_url,
            long_description=readme_content,
        )

        # long_desc is the only optional key; exclude_none drops it without a README.
        payload = registry.model_dump_json(indent=2, by_alias=True, exclude_none=True)
        write_text(self.layout.registry_path, payload + "\n")
        logger.info("Wrote pkg.json")
        return registry
