"""Build metadata tracking for bundled programs."""

__version__ = "0.1.0"
from .bundler import BUILTIN_EXTERNALS, BundlerConfig, build_bundler_config
from .config import BuildMetaConfig, DistLayout
from .descriptor import ProjectDescriptorStore, find_readme
from .errors import BuildMetaError, DescriptorParseError, FileSystemError, LifecycleOrderError
from .ledger import VersionLedger
from .lifecycle import (
    BuildLifecycleOrchestrator,
    BuildState,
    HookRegistry,
    LifecycleHooks,
    LifecyclePhase,
)
from .manifest import ManifestBuilder, dump_manifest, load_manifest
from .registry import RegistryDescriptorBuilder, load_registry_descriptor
from .schemas import Manifest, ProjectDescriptor, RegistryDescriptor
from .session import BuildSession, pkgbuild

__all__ = [
    "__version__",
    "BUILTIN_EXTERNALS",
    "BundlerConfig",
    "build_bundler_config",
    "BuildMetaConfig",
    "DistLayout",
    "ProjectDescriptorStore",
    "find_readme",
    "BuildMetaError",
    "DescriptorParseError",
    "FileSystemError",
    "LifecycleOrderError",
    "VersionLedger",
    "BuildLifecycleOrchestrator",
    "BuildState",
    "HookRegistry",
    "LifecycleHooks",
    "LifecyclePhase",
    "ManifestBuilder",
    "dump_manifest",
    "load_manifest",
    "RegistryDescriptorBuilder",
    "load_registry_descriptor",
    "Manifest",
    "ProjectDescriptor",
    "RegistryDescriptor",
    "BuildSession",
    "pkgbuild",
]
