"""Entry points for the reporting layer: logging setup, registration, rendering."""

from __future__ import annotations

import importlib
import logging
import pkgutil

from dotenv import load_dotenv

from afisviz.config import settings
from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import ArtifactKey
from afisviz.engine.registry import VisualizerRegistry, get_registry

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, settings.afisviz_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def load_visualizers() -> VisualizerRegistry:
    """Import all visualizer modules so @visualizer decorators fire."""
    import afisviz.visualizers as package

    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
    registry = get_registry()
    logger.info("Loaded %d visualizers", registry.count)
    return registry


def render(key: ArtifactKey, archive: ArtifactArchive, diff: bool = False) -> str:
    """SVG markup for one artifact."""
    return load_visualizers().render(key, archive, diff).to_markup()
