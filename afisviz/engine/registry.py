"""Visualizer registry. Every stage visualizer is a function registered via decorator.

Usage:
    @visualizer(stage=Stage.BLOCKS, dependencies=[Stage.INPUT_IMAGE])
    def blocks(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
        ...

Supporting a new artifact = writing one decorated function. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from afisviz.engine.keys import ArtifactKey, Stage

if TYPE_CHECKING:
    from afisviz.engine.archive import ArtifactArchive
    from afisviz.svg.document import SvgElement

logger = logging.getLogger(__name__)

RenderFn = Callable[["ArtifactArchive", ArtifactKey], "SvgElement"]


@dataclass
class VisualizerSpec:
    stage: Stage
    fn: RenderFn
    dependencies: list[Stage] = field(default_factory=list)
    diff: bool = False
    description: str = ""

    def dependency_keys(self, key: ArtifactKey) -> set[ArtifactKey]:
        """The key itself plus every declared dependency, scoped to the key's skeleton."""
        return {key} | {key.sibling(stage) for stage in self.dependencies}


class VisualizerRegistry:
    """Maps each (stage, diff) pair to the one visualizer that draws it."""

    def __init__(self) -> None:
        self._visualizers: dict[tuple[Stage, bool], VisualizerSpec] = {}

    def register(self, spec: VisualizerSpec) -> None:
        slot = (spec.stage, spec.diff)
        if slot in self._visualizers:
            raise ValueError(f"Duplicate visualizer: {spec.stage.value} (diff={spec.diff})")
        self._visualizers[slot] = spec
        logger.debug("Registered visualizer %s%s", spec.stage.value, " (diff)" if spec.diff else "")

    def get(self, stage: Stage, diff: bool = False) -> VisualizerSpec:
        return self._visualizers[(stage, diff)]

    def supports(self, stage: Stage, diff: bool = False) -> bool:
        return (stage, diff) in self._visualizers

    def all(self) -> list[VisualizerSpec]:
        order = list(Stage)
        return sorted(self._visualizers.values(), key=lambda s: (order.index(s.stage), s.diff))

    def dependencies(self, key: ArtifactKey, diff: bool = False) -> set[ArtifactKey]:
        return self.get(key.stage, diff).dependency_keys(key)

    def render(self, key: ArtifactKey, archive: ArtifactArchive, diff: bool = False) -> SvgElement:
        spec = self.get(key.stage, diff)
        document = spec.fn(archive, key)
        logger.debug("Rendered %s%s: %d elements", key, " diff" if diff else "", len(document.children))
        return document

    @property
    def count(self) -> int:
        return len(self._visualizers)


# Module-level singleton
_registry = VisualizerRegistry()


def get_registry() -> VisualizerRegistry:
    return _registry


def visualizer(
    *,
    stage: Stage,
    dependencies: list[Stage] | None = None,
    diff: bool = False,
    description: str = "",
):
    """Decorator to register a visualizer function."""

    def decorator(fn: RenderFn):
        spec = VisualizerSpec(
            stage=stage,
            fn=fn,
            dependencies=dependencies or [],
            diff=diff,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
