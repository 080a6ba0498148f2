"""Every color decision made by the renderers.

Raster colors are packed 32-bit ARGB integers. Vector colors are CSS strings.
Renderers never pick colors on their own; they ask this module, so the same
semantic (an added minutia, a masked-out block) always looks the same.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from afisviz.models.template import MinutiaType
from afisviz.raster.pixmap import gray

# ── Boolean masks ──

PAINT_FOREGROUND = 0xFF000000
PAINT_BACKGROUND = 0xFFFFFFFF
# Translucent yellow for "in", cyan for "out" over the fingerprint image.
MASK_FOREGROUND = 0x20FFFF00
MASK_BACKGROUND = 0x2000FFFF
# Binarized ridges over the image, background left clear.
BINARY_OVERLAY = 0x9000FFFF
SKELETON_SHADOW = 0xFFFF0000
TRANSPARENT = 0x00000000
# Transparent white renders the same whether the pixmap ends up as PNG or JPEG.
TRANSPARENT_WHITE = 0x00FFFFFF

# ── Diffs ──

DIFF_UNCHANGED_ON = 0xFF000000
DIFF_UNCHANGED_OFF = 0xFFFFFFFF
DIFF_ADDED = 0xFF00FF00
DIFF_REMOVED = 0xFFFF0000

# ── Orientation ──

PAINT_OPACITY = 0xFF
OVERLAY_OPACITY = 0x60
# Weakest vectors keep this much saturation so that hue stays readable.
_MIN_SATURATION = 0.2
ORIENTATION_STROKE = "red"

# ── Block weights (contrast) ──

WEIGHT_STROKE = "#080"
WEIGHT_STROKE_WIDTH = 0.3
WEIGHT_FILL = "#0f0"
WEIGHT_FILL_OPACITY = 0.2

# ── Block grids and histograms ──

GRID_STROKE = "#00c"
GRID_PRIMARY_WIDTH = 0.5
GRID_SECONDARY_WIDTH = 0.15
GRID_SECONDARY_OPACITY = 0.6
HISTOGRAM_STROKE = "#00c"
HISTOGRAM_STROKE_WIDTH = 0.2
HISTOGRAM_FILL = "#00c"
HISTOGRAM_FILL_OPACITY = 0.3

# ── Skeletons ──

SKELETON_ENDING = "blue"
SKELETON_OTHER = "cyan"
SKELETON_ADDED = "green"
SKELETON_REMOVED = "red"

# ── Minutiae ──

MINUTIA_TYPE = {
    MinutiaType.ENDING: "blue",
    MinutiaType.BIFURCATION: "green",
}
MINUTIA_REMOVED = "red"
MINUTIA_ADDED = "orange"
MINUTIA_POSITION = "red"

# ── Edges ──

# Edges this long or longer get the darkest shade.
EDGE_REFERENCE_LENGTH = 300.0
EDGE_SYMMETRIC_WIDTH = 1.2
EDGE_ASYMMETRIC_WIDTH = 0.8
EDGE_INDEXED_WIDTH = 0.6

# ── Pairing ──

PAIRING_TREE = "green"
PAIRING_TREE_WIDTH = 2.0
PAIRING_SUPPORT = "yellow"
PAIRING_ROOT = "blue"
ROOT_LINE = "green"
ROOT_LINE_WIDTH = 0.4


def normalize(values: NDArray[np.float64]) -> NDArray[np.float64]:
    """Scale values to [0, 1] by the observed range. A flat field maps to 0.5."""
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return values
    low = float(values.min())
    high = float(values.max())
    if high == low:
        return np.full(values.shape, 0.5)
    return (values - low) / (high - low)


def weight_radius(weight: float, radius: float) -> float:
    """Marker radius whose area, not radius, grows linearly with weight."""
    return math.sqrt(weight) * radius


def grayscale(weights: NDArray[np.float64]) -> NDArray[np.uint32]:
    """Opaque gray per normalized weight, 0 black and 1 white."""
    levels = np.rint(np.asarray(weights) * 255).astype(np.uint32)
    return np.uint32(gray(0)) | (levels << 16) | (levels << 8) | levels


def hsb_to_rgb(hue, saturation, brightness) -> NDArray[np.uint32]:
    """Packed 0xRRGGBB for HSB components in [0, 1]; hue wraps around.

    Works element-wise on arrays and on scalars alike.
    """
    hue = np.asarray(hue, dtype=np.float64)
    s = np.broadcast_to(np.asarray(saturation, dtype=np.float64), hue.shape)
    v = np.broadcast_to(np.asarray(brightness, dtype=np.float64), hue.shape)
    h = (hue - np.floor(hue)) * 6.0
    sector = np.floor(h).astype(np.int64) % 6
    f = h - np.floor(h)
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))
    choices = [sector == i for i in range(6)]
    r = np.select(choices, [v, q, p, p, t, v])
    g = np.select(choices, [t, v, v, q, p, p])
    b = np.select(choices, [p, p, t, v, v, q])

    def channel(c):
        return (c * 255.0 + 0.5).astype(np.uint32)

    return (channel(r) << 16) | (channel(g) << 8) | channel(b)


def orientation_hue(orientation):
    """Orientation (period π) spread over the whole hue circle."""
    return np.mod(np.asarray(orientation, dtype=np.float64) / math.pi, 1.0)


def orientation_colors(
    orientations: NDArray[np.float64],
    strengths: NDArray[np.float64],
    opacity: int,
) -> NDArray[np.uint32]:
    """ARGB per orientation; weak vectors fade toward white."""
    saturation = _MIN_SATURATION + (1.0 - _MIN_SATURATION) * np.asarray(strengths)
    rgb = hsb_to_rgb(orientation_hue(orientations), saturation, 1.0)
    return rgb | np.uint32(opacity << 24)


def orientation_color(orientation: float, strength: float, opacity: int = PAINT_OPACITY) -> int:
    return int(orientation_colors(np.array(orientation), np.array(strength), opacity))


def vector_strengths(lengths: NDArray[np.float64]) -> NDArray[np.float64]:
    """log1p(length) relative to the longest vector in the field."""
    lengths = np.asarray(lengths, dtype=np.float64)
    top = math.log1p(float(lengths.max())) if lengths.size else 0.0
    if top == 0.0:
        return np.zeros(lengths.shape)
    return np.log1p(lengths) / top


def edge_shape_color(length: float, angle: float) -> str:
    """Hue from the endpoint angle, darker for longer edges."""
    stretch = min(1.0, math.log1p(length) / math.log1p(EDGE_REFERENCE_LENGTH))
    rgb = int(hsb_to_rgb(angle / (2 * math.pi), 1.0, 1.0 - 0.5 * stretch))
    return css(rgb)


def css(color: int) -> str:
    """CSS hex for the RGB part of a color, alpha ignored."""
    return f"#{color & 0xFFFFFF:06x}"


def skeleton_minutia_color(ridge_count: int) -> str:
    return SKELETON_ENDING if ridge_count == 1 else SKELETON_OTHER


def minutia_color(kind: MinutiaType) -> str:
    return MINUTIA_TYPE[kind]
