"""Write SVG markup from an element tree."""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

from afisviz.svg.document import SvgElement

_SVG_NS = "http://www.w3.org/2000/svg"
# Always double-quote attributes.
_ATTR_ENTITIES = {'"': "&quot;"}


def _write(element: SvgElement, depth: int, lines: list[str]) -> None:
    indent = "  " * depth
    attr_str = "".join(f" {k}={quoteattr(v, _ATTR_ENTITIES)}" for k, v in element.attributes.items())
    if not element.children:
        lines.append(f"{indent}<{element.tag}{attr_str} />")
        return
    lines.append(f"{indent}<{element.tag}{attr_str}>")
    for child in element.children:
        _write(child, depth + 1, lines)
    lines.append(f"{indent}</{element.tag}>")


def serialize_svg(root: SvgElement) -> str:
    """Generate SVG markup; the root gets the SVG namespace if it lacks one."""
    if root.tag == "svg" and "xmlns" not in root.attributes:
        root = root.model_copy(update={"attributes": {"xmlns": _SVG_NS, **root.attributes}})
    lines = ['<?xml version="1.0" encoding="UTF-8"?>']
    _write(root, 0, lines)
    return "\n".join(lines)
