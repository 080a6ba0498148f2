"""SVG element tree model."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field


class SvgElement(BaseModel):
    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list[SvgElement] = Field(default_factory=list)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def number(self, name: str) -> float:
        return float(self.attributes[name])

    def walk(self) -> Iterator[SvgElement]:
        """Depth-first iteration over this element and all descendants, in document order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, tag: str) -> list[SvgElement]:
        return [el for el in self.walk() if el.tag == tag]

    def to_markup(self) -> str:
        from afisviz.svg.serializer import serialize_svg

        return serialize_svg(self)
