"""Tests for the vector overlay and split view builders."""

from __future__ import annotations

from afisviz.raster.pixmap import Pixmap
from afisviz.rendering.layers import block_grid_lines, double_block_grid, embed_image, embed_jpeg, embed_png
from afisviz.rendering.overlay import VectorBuffer
from afisviz.rendering.split import SplitView
from afisviz.rendering import colors
from afisviz.svg.primitives import circle, line


def test_render_without_padding():
    root = VectorBuffer(30, 20).render()
    assert root.tag == "svg"
    assert root.get("viewBox") == "0 0 30 20"
    assert (root.get("width"), root.get("height")) == ("30", "20")
    assert root.children == []


def test_padding_expands_canvas_without_moving_markers():
    marker = circle(0, 0, 2)
    root = VectorBuffer(30, 20).padding(1.5).add(marker).render()
    assert root.get("viewBox") == "-1.5 -1.5 33 23"
    assert root.children[0].get("cx") == "0"


def test_layers_keep_insertion_order():
    background = embed_png(Pixmap(30, 20))
    markers = [line(0, 0, 1, 1), circle(5, 5, 1)]
    root = VectorBuffer(30, 20).add(background).add(markers).add(circle(1, 1, 1)).render()
    assert [c.tag for c in root.children] == ["image", "line", "circle", "circle"]


def test_missing_background_is_skipped():
    root = VectorBuffer(10, 10).add(embed_image(10, 10, None)).add(circle(1, 1, 1)).render()
    assert [c.tag for c in root.children] == ["circle"]


def test_embedded_images_use_data_uris():
    pixmap = Pixmap(7, 3)
    png = embed_png(pixmap)
    assert png.get("href").startswith("data:image/png;base64,")
    assert (png.get("width"), png.get("height")) == ("7", "3")
    assert embed_jpeg(pixmap).get("href").startswith("data:image/jpeg;base64,")
    external = embed_image(14, 6, pixmap.png())
    assert external.get("href").startswith("data:image/jpeg;base64,")
    assert external.get("width") == "14"


def test_split_view_coordinates():
    split = SplitView((100, 100), (100, 100), gutter=12)
    assert (split.left_x(0), split.left_y(0)) == (0, 0)
    assert (split.right_x(0), split.right_y(0)) == (112, 0)
    assert split.size == (212, 100)


def test_split_view_uneven_sizes():
    split = SplitView((50, 80), (120, 40), gutter=10)
    assert split.size == (180, 80)
    assert split.right_x(5) == 65
    assert split.left_x(5) == 5


def test_split_view_default_gutter():
    from afisviz.config import settings

    split = SplitView((10, 10), (10, 10))
    assert split.right_x(0) == 10 + settings.split_gutter


def test_split_view_translates_right_content():
    split = SplitView((40, 30), (40, 30), gutter=20)
    split.add_left(circle(1, 1, 1)).add_right([circle(1, 1, 1)]).add_right(None)
    root = split.render()
    assert [c.tag for c in root.children] == ["circle", "g"]
    assert root.children[1].get("transform") == "translate(60 0)"
    assert root.get("viewBox") == "0 0 100 30"


def test_block_grid_lines(block_map):
    lines = block_grid_lines(block_map.primary, stroke="#000")
    # 3 vertical and 3 horizontal boundaries.
    assert len(lines) == 6
    assert (lines[1].get("x1"), lines[1].get("y1"), lines[1].get("y2")) == ("4", "0", "8")


def test_double_grid_draws_primary_on_top(block_map):
    lines = double_block_grid(block_map)
    secondary = len(block_map.secondary.x) + len(block_map.secondary.y)
    assert all(l.get("stroke-opacity") is not None for l in lines[:secondary])
    assert all(l.get("stroke-width") == "0.5" for l in lines[secondary:])
    assert all(l.get("stroke") == colors.GRID_STROKE for l in lines)
