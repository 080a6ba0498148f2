"""Minimal SVG element model and serializer."""

from afisviz.svg.document import SvgElement
from afisviz.svg.serializer import serialize_svg

__all__ = ["SvgElement", "serialize_svg"]
