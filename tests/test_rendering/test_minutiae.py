"""Tests for minutia, template and edge-table renderers."""

from __future__ import annotations

from afisviz.models import EdgeHashEntry, IndexedEdge, Minutia, MinutiaType
from afisviz.rendering import colors
from afisviz.rendering.minutiae import (
    mark_edges,
    mark_hash,
    mark_minutia,
    mark_minutia_position,
    mark_template,
    sorted_edge_lines,
)


def test_minutia_marker_is_rotated_tick():
    marker = mark_minutia(Minutia(10, 20, 3.141592653589793 / 2, MinutiaType.BIFURCATION))
    assert marker.tag == "g"
    assert marker.get("transform") == "translate(10.5 20.5) rotate(90)"
    circle, tick = marker.children
    assert circle.tag == "circle" and circle.get("fill") == "none"
    assert (tick.get("x1"), tick.get("x2"), tick.get("y2")) == ("3.5", "10", "0")
    assert circle.get("stroke") == tick.get("stroke") == colors.MINUTIA_TYPE[MinutiaType.BIFURCATION]


def test_template_colors_by_type(template):
    markers = mark_template(template)
    strokes = [m.children[0].get("stroke") for m in markers]
    assert strokes == ["blue", "green", "blue"]


def test_minutia_color_override():
    marker = mark_minutia(Minutia(0, 0, 0.0), color="red")
    assert marker.children[1].get("stroke") == "red"


def test_minutia_position():
    dot = mark_minutia_position(Minutia(3, 4, 1.0))
    assert (dot.get("cx"), dot.get("cy"), dot.get("r"), dot.get("fill")) == ("3.5", "4.5", "2.5", "red")


def test_sorted_edge_lines_non_increasing(edge_table):
    lengths = [edge.length for _, edge in sorted_edge_lines(edge_table)]
    assert lengths == sorted(lengths, reverse=True)
    assert lengths[0] == 22.4


def test_mark_edges_layout(edge_table, template):
    markers = mark_edges(edge_table, template)
    lines = [m for m in markers if m.tag == "line"]
    dots = [m for m in markers if m.tag == "circle"]
    assert len(lines) == 6
    assert len(dots) == len(template.minutiae)
    # Dots go on top of every edge.
    assert markers[-3:] == dots
    # Longest edge first; 1 -> 2 is one-sided, 0 <-> 1 is mutual.
    assert [l.get("stroke-width") for l in lines] == ["0.8", "0.8", "1.2", "1.2", "1.2", "1.2"]


def test_edge_is_split_at_midpoint(edge_table, template):
    lines = [m for m in mark_edges(edge_table, template) if m.tag == "line"]
    reference_half, neighbor_half = lines[0], lines[1]
    # Minutia 1 at (20.5, 5.5) to minutia 2 at (10.5, 25.5).
    assert (reference_half.get("x1"), reference_half.get("y1")) == ("20.5", "5.5")
    assert (neighbor_half.get("x1"), neighbor_half.get("y1")) == ("10.5", "25.5")
    assert (reference_half.get("x2"), reference_half.get("y2")) == ("15.5", "15.5")
    assert (neighbor_half.get("x2"), neighbor_half.get("y2")) == ("15.5", "15.5")
    assert reference_half.get("stroke") == colors.edge_shape_color(22.4, 1.0)
    assert neighbor_half.get("stroke") == colors.edge_shape_color(22.4, 2.0)


def test_hash_draws_each_edge_once(template):
    forward = IndexedEdge(length=15.0, reference_angle=0.1, neighbor_angle=0.2, reference=0, neighbor=1)
    backward = IndexedEdge(length=15.0, reference_angle=0.2, neighbor_angle=0.1, reference=1, neighbor=0)
    longer = IndexedEdge(length=30.0, reference_angle=0.5, neighbor_angle=0.6, reference=0, neighbor=2)
    entries = [EdgeHashEntry(1, (forward, backward)), EdgeHashEntry(2, (longer,))]
    markers = mark_hash(entries, template)
    lines = [m for m in markers if m.tag == "line"]
    assert len(lines) == 4
    assert all(l.get("stroke-width") == "0.6" for l in lines)
    # Longer edge (0 -> 2) drawn first.
    assert (lines[1].get("x1"), lines[1].get("y1")) == ("10.5", "25.5")
    assert [m.tag for m in markers[-3:]] == ["circle"] * 3
