"""Exceptions raised by the rendering core."""

from __future__ import annotations


class VisualizationError(Exception):
    """Base class for every error raised by afisviz."""


class UnsupportedFormatError(VisualizationError):
    """Image bytes do not start with a PNG, JPEG, TIFF or SVG signature."""


class MissingArtifactError(VisualizationError, KeyError):
    """A visualizer needs an artifact that the archive does not hold."""

    def __init__(self, key) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Artifact not available: {self.key}"
