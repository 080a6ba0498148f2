"""Helpers shared by the stage visualizers."""

from __future__ import annotations

from afisviz.config import settings
from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import Stage
from afisviz.rendering.layers import embed_image
from afisviz.rendering.overlay import VectorBuffer
from afisviz.svg.document import SvgElement


def canvas(width: float, height: float) -> VectorBuffer:
    return VectorBuffer(width, height).padding(settings.default_padding)


def background(archive: ArtifactArchive, width: int, height: int) -> SvgElement | None:
    """The raw scan as a JPEG backdrop, or None when it was not recorded."""
    return embed_image(width, height, archive.get(Stage.INPUT_IMAGE))
