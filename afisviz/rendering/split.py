"""Side-by-side canvas for drawing correspondences between two objects."""

from __future__ import annotations

from afisviz.config import settings
from afisviz.rendering.overlay import VectorBuffer
from afisviz.svg.primitives import Content, group, translate


class SplitView(VectorBuffer):
    """Two canvases laid out horizontally with a gutter between them.

    Markers spanning both halves are placed with ``left_x``/``left_y`` and
    ``right_x``/``right_y``, which map each object's local coordinates into the
    shared canvas.
    """

    def __init__(
        self,
        left_size: tuple[float, float],
        right_size: tuple[float, float],
        gutter: float | None = None,
    ) -> None:
        self.left_size = left_size
        self.right_size = right_size
        self.gutter = settings.split_gutter if gutter is None else gutter
        super().__init__(
            left_size[0] + self.gutter + right_size[0],
            max(left_size[1], right_size[1]),
        )

    @property
    def right_offset(self) -> float:
        return self.left_size[0] + self.gutter

    def left_x(self, x: float) -> float:
        return x

    def left_y(self, y: float) -> float:
        return y

    def right_x(self, x: float) -> float:
        return x + self.right_offset

    def right_y(self, y: float) -> float:
        return y

    def add_left(self, content: Content) -> SplitView:
        """Add content drawn in the left object's local coordinates."""
        self.add(content)
        return self

    def add_right(self, content: Content) -> SplitView:
        """Add content drawn in the right object's local coordinates."""
        if content is not None:
            self.add(group(content, transform=translate(self.right_offset, 0)))
        return self
