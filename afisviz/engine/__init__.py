"""Artifact keys, the artifact archive and the visualizer registry."""

from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import ArtifactKey, Stage
from afisviz.engine.registry import VisualizerRegistry, VisualizerSpec, get_registry, visualizer

__all__ = [
    "ArtifactArchive",
    "ArtifactKey",
    "Stage",
    "VisualizerRegistry",
    "VisualizerSpec",
    "get_registry",
    "visualizer",
]
