"""Vector overlay builder: a raster background with vector markers on top."""

from __future__ import annotations

from afisviz.svg.document import SvgElement
from afisviz.svg.primitives import Content, flatten, fmt


class VectorBuffer:
    """Accumulates layers over a canvas of the artifact's natural pixel size.

    Layers draw in insertion order. Padding widens the visible canvas on all
    sides without moving anything, so markers at the image border stay whole.
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._padding = 0.0
        self._content: list[SvgElement] = []

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def padding(self, padding: float) -> VectorBuffer:
        self._padding = padding
        return self

    def add(self, content: Content) -> VectorBuffer:
        """Append a shape or a fragment. ``None`` (e.g. a missing background) is skipped."""
        self._content.extend(flatten(content))
        return self

    def content(self) -> list[SvgElement]:
        return list(self._content)

    def render(self) -> SvgElement:
        p = self._padding
        width = self.width + 2 * p
        height = self.height + 2 * p
        return SvgElement(
            tag="svg",
            attributes={
                "viewBox": f"{fmt(-p)} {fmt(-p)} {fmt(width)} {fmt(height)}",
                "width": fmt(width),
                "height": fmt(height),
            },
            children=self.content(),
        )
