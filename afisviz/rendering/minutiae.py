"""Renderers for minutiae, templates and their edge tables."""

from __future__ import annotations

import math
from collections.abc import Sequence

from afisviz.models.template import EdgeHashEntry, EdgeShape, IndexedEdge, Minutia, NeighborEdge, Template
from afisviz.rendering import colors
from afisviz.svg.document import SvgElement
from afisviz.svg.primitives import circle, fmt, group, line

MINUTIA_RADIUS = 3.5
MINUTIA_TICK_END = 10.0
POSITION_RADIUS = 2.5


def mark_minutia(minutia: Minutia, color: str | None = None) -> SvgElement:
    """Circle at the position with a tick pointing along the minutia's direction."""
    color = color or colors.minutia_color(minutia.type)
    x, y = minutia.center
    return group(
        [
            circle(0, 0, MINUTIA_RADIUS, fill="none", stroke=color),
            line(MINUTIA_RADIUS, 0, MINUTIA_TICK_END, 0, stroke=color),
        ],
        transform=f"translate({fmt(x)} {fmt(y)}) rotate({fmt(math.degrees(minutia.direction))})",
    )


def mark_template(template: Template) -> list[SvgElement]:
    return [mark_minutia(minutia) for minutia in template.minutiae]


def mark_minutia_position(minutia: Minutia) -> SvgElement:
    x, y = minutia.center
    return circle(x, y, POSITION_RADIUS, fill=colors.MINUTIA_POSITION)


def mark_minutia_positions(template: Template) -> list[SvgElement]:
    return [mark_minutia_position(minutia) for minutia in template.minutiae]


def mark_edge_shape(shape: EdgeShape, reference: Minutia, neighbor: Minutia, width: float) -> list[SvgElement]:
    """Two half-segments meeting in the middle, each colored by its own endpoint's angle."""
    rx, ry = reference.center
    nx, ny = neighbor.center
    mx = rx + 0.5 * (nx - rx)
    my = ry + 0.5 * (ny - ry)
    return [
        line(rx, ry, mx, my, stroke=colors.edge_shape_color(shape.length, shape.reference_angle), stroke_width=width),
        line(nx, ny, mx, my, stroke=colors.edge_shape_color(shape.length, shape.neighbor_angle), stroke_width=width),
    ]


def mark_neighbor_edge(edge: NeighborEdge, reference: int, template: Template, symmetrical: bool) -> list[SvgElement]:
    width = colors.EDGE_SYMMETRIC_WIDTH if symmetrical else colors.EDGE_ASYMMETRIC_WIDTH
    return mark_edge_shape(edge, template.minutiae[reference], template.minutiae[edge.neighbor], width)


def sorted_edge_lines(edges: Sequence[Sequence[NeighborEdge]]) -> list[tuple[int, NeighborEdge]]:
    """All (reference, edge) pairs, longest first."""
    lines = [(reference, edge) for reference, row in enumerate(edges) for edge in row]
    lines.sort(key=lambda item: -item[1].length)
    return lines


def mark_edges(edges: Sequence[Sequence[NeighborEdge]], template: Template) -> list[SvgElement]:
    """Neighbor-edge table, long edges first so short dense ones stay visible.

    Edges listed by both endpoints are drawn wider.
    """
    markers: list[SvgElement] = []
    for reference, edge in sorted_edge_lines(edges):
        symmetrical = any(back.neighbor == reference for back in edges[edge.neighbor])
        markers.extend(mark_neighbor_edge(edge, reference, template, symmetrical))
    markers.extend(mark_minutia_positions(template))
    return markers


def mark_indexed_edge(edge: IndexedEdge, template: Template) -> list[SvgElement]:
    return mark_edge_shape(
        edge,
        template.minutiae[edge.reference],
        template.minutiae[edge.neighbor],
        colors.EDGE_INDEXED_WIDTH,
    )


def mark_hash(entries: Sequence[EdgeHashEntry], template: Template) -> list[SvgElement]:
    """Edge hash contents; each undirected edge is drawn once, from its lower index."""
    edges = sorted(
        (edge for entry in entries for edge in entry.edges),
        key=lambda edge: -edge.length,
    )
    markers: list[SvgElement] = []
    for edge in edges:
        if edge.reference < edge.neighbor:
            markers.extend(mark_indexed_edge(edge, template))
    markers.extend(mark_minutia_positions(template))
    return markers
