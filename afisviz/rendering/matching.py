"""Renderers for matcher output: root pairs and pairing graphs."""

from __future__ import annotations

from collections.abc import Sequence

from afisviz.models.matching import EdgePair, MatchSide, MinutiaPair, PairingGraph
from afisviz.models.template import Minutia, Template
from afisviz.rendering import colors
from afisviz.rendering.minutiae import MINUTIA_RADIUS, mark_minutia_positions
from afisviz.rendering.split import SplitView
from afisviz.svg.document import SvgElement
from afisviz.svg.primitives import circle, line


def _pairing_edge(edge: EdgePair, side: MatchSide, template: Template, **style) -> SvgElement:
    rx, ry = template.minutiae[edge.start.side(side)].center
    nx, ny = template.minutiae[edge.end.side(side)].center
    return line(rx, ry, nx, ny, **style)


def mark_pairing_tree_edge(edge: EdgePair, side: MatchSide, template: Template) -> SvgElement:
    return _pairing_edge(
        edge, side, template, stroke=colors.PAIRING_TREE, stroke_width=colors.PAIRING_TREE_WIDTH
    )


def mark_pairing_support_edge(edge: EdgePair, side: MatchSide, template: Template) -> SvgElement:
    return _pairing_edge(edge, side, template, stroke=colors.PAIRING_SUPPORT)


def mark_root(minutia: Minutia) -> SvgElement:
    x, y = minutia.center
    return circle(x, y, MINUTIA_RADIUS, fill=colors.PAIRING_ROOT)


def mark_pairing(pairing: PairingGraph, side: MatchSide, template: Template) -> list[SvgElement]:
    """One side of a pairing: support edges, then the tree, then positions, then the root.

    Later layers win, so the root and the tree stay visible over dense support edges.
    """
    markers = [mark_pairing_support_edge(edge, side, template) for edge in pairing.support]
    markers.extend(mark_pairing_tree_edge(edge, side, template) for edge in pairing.tree)
    markers.extend(mark_minutia_positions(template))
    markers.append(mark_root(template.minutiae[pairing.root.side(side)]))
    return markers


def mark_roots(roots: Sequence[MinutiaPair], probe: Template, candidate: Template, gutter: float | None = None) -> SplitView:
    """Lines from each probe minutia to its candidate counterpart across a split view."""
    split = SplitView(probe.size, candidate.size, gutter)
    for pair in roots:
        px, py = probe.minutiae[pair.probe].center
        cx, cy = candidate.minutiae[pair.candidate].center
        split.add(
            line(
                split.left_x(px),
                split.left_y(py),
                split.right_x(cx),
                split.right_y(cy),
                stroke=colors.ROOT_LINE,
                stroke_width=colors.ROOT_LINE_WIDTH,
            )
        )
    return split


def split_pairing(pairing: PairingGraph, probe: Template, candidate: Template, gutter: float | None = None) -> SplitView:
    """Both sides of a pairing next to each other, probe on the left."""
    split = SplitView(probe.size, candidate.size, gutter)
    split.add_left(mark_pairing(pairing, MatchSide.PROBE, probe))
    split.add_right(mark_pairing(pairing, MatchSide.CANDIDATE, candidate))
    return split
