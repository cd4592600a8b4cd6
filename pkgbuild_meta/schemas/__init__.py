"""Schema definitions for build metadata."""

from .build import Manifest, ProjectDescriptor, RegistryDescriptor

__all__ = [
    "Manifest",
    "ProjectDescriptor",
    "RegistryDescriptor",
]
