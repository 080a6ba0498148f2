"""Builders for the handful of SVG shapes the renderers draw."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from afisviz.svg.document import SvgElement

# A marker set: a single shape or an ordered fragment of shapes.
Content = SvgElement | Sequence[SvgElement] | None


def fmt(value: float) -> str:
    """Compact number formatting: 2.0 -> "2", 0.30000001 -> "0.3"."""
    if isinstance(value, int):
        return str(value)
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _style(attrs: dict[str, str], style: dict[str, object]) -> dict[str, str]:
    for key, value in style.items():
        if value is None:
            continue
        name = key.rstrip("_").replace("_", "-")
        attrs[name] = fmt(value) if isinstance(value, (int, float)) else str(value)
    return attrs


def flatten(content: Content) -> list[SvgElement]:
    if content is None:
        return []
    if isinstance(content, SvgElement):
        return [content]
    return list(content)


def line(x1: float, y1: float, x2: float, y2: float, **style) -> SvgElement:
    attrs = {"x1": fmt(x1), "y1": fmt(y1), "x2": fmt(x2), "y2": fmt(y2)}
    return SvgElement(tag="line", attributes=_style(attrs, style))


def circle(cx: float, cy: float, r: float, **style) -> SvgElement:
    attrs = {"cx": fmt(cx), "cy": fmt(cy), "r": fmt(r)}
    return SvgElement(tag="circle", attributes=_style(attrs, style))


def polygon(points: Iterable[tuple[float, float]], **style) -> SvgElement:
    attrs = {"points": " ".join(f"{fmt(x)},{fmt(y)}" for x, y in points)}
    return SvgElement(tag="polygon", attributes=_style(attrs, style))


def image(width: float, height: float, href: str) -> SvgElement:
    attrs = {"width": fmt(width), "height": fmt(height), "href": href}
    return SvgElement(tag="image", attributes=attrs)


def group(content: Content, transform: str | None = None, **style) -> SvgElement:
    attrs = _style({}, style)
    if transform:
        attrs["transform"] = transform
    return SvgElement(tag="g", attributes=attrs, children=flatten(content))


def translate(dx: float, dy: float) -> str:
    return f"translate({fmt(dx)} {fmt(dy)})"
