"""Binds the metadata writers to the bundler's build lifecycle."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Tuple

from .config import BuildMetaConfig
from .descriptor import ProjectDescriptorStore, find_readme
from .errors import LifecycleOrderError
from .ledger import VersionLedger
from .manifest import ManifestBuilder
from .registry import RegistryDescriptorBuilder
from .schemas.build import Manifest, RegistryDescriptor

logger = logging.getLogger(__name__)

HookCallback = Callable[..., None]


class LifecyclePhase(str, Enum):
    COMPILE = "compile"
    DONE = "done"
    AFTER_EMIT = "afterEmit"


class BuildState(str, Enum):
    IDLE = "idle"
    COMPILING = "compiling"
    BUILT = "built"
    EMITTED = "emitted"


class LifecycleHooks(Protocol):
    """Registration surface a bundler adapter must provide.

    ``COMPILE`` and ``AFTER_EMIT`` fire without a payload; ``DONE`` fires with
    the build's asset report (``assetsByChunkName`` or stats JSON carrying it).
    """

    def tap(self, phase: LifecyclePhase, name: str, callback: HookCallback) -> None:  # pragma: no cover - interface
        ...


@dataclass
class HookRegistry:
    """In-process hook table that runs taps one at a time in registration order."""

    taps: Dict[LifecyclePhase, List[Tuple[str, HookCallback]]] = field(default_factory=dict)

    def tap(self, phase: LifecyclePhase, name: str, callback: HookCallback) -> None:
        self.taps.setdefault(LifecyclePhase(phase), []).append((name, callback))

    def names(self, phase: LifecyclePhase) -> List[str]:
        return [name for name, _ in self.taps.get(LifecyclePhase(phase), [])]

    def fire(self, phase: LifecyclePhase, payload: Any = None) -> None:
        args = () if payload is None else (payload,)
        for name, callback in list(self.taps.get(LifecyclePhase(phase), [])):
            logger.debug("Running %s hook %s", LifecyclePhase(phase).value, name)
            callback(*args)


class BuildLifecycleOrchestrator:
    """Drives Idle -> Compiling -> Built -> Emitted for each build of a session.

    A compile may start from any state, since watch mode begins a new cycle
    whenever sources change. ``done`` and ``afterEmit`` must follow their
    predecessor or :class:`LifecycleOrderError` is raised.
    """

    def __init__(
        self,
        store: ProjectDescriptorStore,
        ledger: VersionLedger,
        manifests: ManifestBuilder,
        registry: RegistryDescriptorBuilder,
        config: BuildMetaConfig,
    ) -> None:
        self.store = store
        self.ledger = ledger
        self.manifests = manifests
        self.registry = registry
        self.config = config
        self.readme_content: Optional[str] = find_readme(config.project_root, config.readme_candidates)
        self.state = BuildState.IDLE
        self.last_manifest: Optional[Manifest] = None
        self.last_registry: Optional[RegistryDescriptor] = None

    @classmethod
    def from_config(cls, config: BuildMetaConfig, store: Optional[ProjectDescriptorStore] = None) -> "BuildLifecycleOrchestrator":
        layout = config.layout
        return cls(
            store=store or ProjectDescriptorStore(config.descriptor_path, layout),
            ledger=VersionLedger(layout.versions_path),
            manifests=ManifestBuilder(layout, script_extension=config.script_extension),
            registry=RegistryDescriptorBuilder(layout),
            config=config,
        )

    def apply(self, hooks: LifecycleHooks) -> None:
        hooks.tap(LifecyclePhase.COMPILE, "update_package_json", self.on_compile)
        hooks.tap(LifecyclePhase.DONE, "record_build", self.on_done)
        hooks.tap(LifecyclePhase.AFTER_EMIT, "make_pkg_json", self.on_after_emit)

    def on_compile(self, *_: Any) -> None:
        self.store.refresh_if_changed()
        self.state = BuildState.COMPILING

    def on_done(self, asset_report: Mapping[str, object]) -> None:
        self._require(LifecyclePhase.DONE, BuildState.COMPILING)
        version = self.store.version
        self.ledger.record_version(version)
        self.last_manifest = self.manifests.build_manifest(
            asset_report,
            self.config.dependencies,
            version,
        )
        self.state = BuildState.BUILT

    def on_after_emit(self, *_: Any) -> None:
        self._require(LifecyclePhase.AFTER_EMIT, BuildState.BUILT)
        self.last_registry = self.registry.build_descriptor(
            self.store.descriptor,
            self.config.homepage_url,
            self.readme_content,
        )
        self.state = BuildState.EMITTED

    def _require(self, phase: LifecyclePhase, expected: BuildState) -> None:
        if self.state is not expected:
            raise LifecycleOrderError(
                f"'{phase.value}' fired while {self.state.value}; expected {expected.value}"
            )
