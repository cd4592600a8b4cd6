"""Single entry point that prepares a build session."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from .bundler import BundlerConfig, build_bundler_config
from .config import BuildMetaConfig
from .descriptor import ProjectDescriptorStore
from .lifecycle import BuildLifecycleOrchestrator, LifecycleHooks
from .utils import ensure_dir

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildSession:
    config: BuildMetaConfig
    orchestrator: BuildLifecycleOrchestrator
    bundler: BundlerConfig

    def apply(self, hooks: LifecycleHooks) -> None:
        self.orchestrator.apply(hooks)


def pkgbuild(
    programs: Mapping[str, str],
    dependencies: Sequence[str],
    homepage_url: str,
    externals: Optional[Mapping[str, str]] = None,
    *,
    project_root: Optional[Path] = None,
) -> BuildSession:
    """Load the project descriptor and wire metadata tracking for one session.

    A malformed ``package.json`` raises :class:`DescriptorParseError` here and
    the session is never created.
    """

    config = BuildMetaConfig.from_project(
        project_root,
        dependencies=dependencies,
        homepage_url=homepage_url,
    )
    layout = config.layout
    ensure_dir(layout.root)

    store = ProjectDescriptorStore(config.descriptor_path, layout)
    descriptor = store.load()
    logger.info("Building version %s", descriptor.version)
    ensure_dir(layout.version_dir(descriptor.version))

    orchestrator = BuildLifecycleOrchestrator.from_config(config, store=store)
    bundler = build_bundler_config(
        programs,
        descriptor,
        layout,
        externals,
        descriptor_path=config.descriptor_path,
    )
    return BuildSession(config=config, orchestrator=orchestrator, bundler=bundler)
