"""In-memory view of the artifacts recorded for one pipeline run."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from afisviz.engine.keys import ArtifactKey, Stage
from afisviz.errors import MissingArtifactError


def _key(key: ArtifactKey | Stage) -> ArtifactKey:
    return key if isinstance(key, ArtifactKey) else ArtifactKey(key)


def _lookup(key: object) -> ArtifactKey | None:
    """Key to look up, or None when nothing can be stored under it."""
    if isinstance(key, ArtifactKey):
        return key
    if isinstance(key, Stage) and not key.per_skeleton:
        return ArtifactKey(key)
    return None


class ArtifactArchive(Mapping[ArtifactKey, Any]):
    """Read-only artifact lookup handed to visualizers.

    Plain stages can be used in place of keys for everything that is not a
    skeleton stage.
    """

    def __init__(self, artifacts: Mapping[ArtifactKey | Stage, Any] | None = None) -> None:
        self._artifacts = {_key(k): v for k, v in (artifacts or {}).items()}

    def __getitem__(self, key: ArtifactKey | Stage) -> Any:
        lookup = _lookup(key)
        if lookup is None:
            raise KeyError(key)
        return self._artifacts[lookup]

    def __iter__(self) -> Iterator[ArtifactKey]:
        return iter(self._artifacts)

    def __len__(self) -> int:
        return len(self._artifacts)

    def __contains__(self, key: object) -> bool:
        lookup = _lookup(key)
        return lookup is not None and lookup in self._artifacts

    def get(self, key: ArtifactKey | Stage, default: Any = None) -> Any:
        lookup = _lookup(key)
        if lookup is None:
            return default
        return self._artifacts.get(lookup, default)

    def require(self, key: ArtifactKey | Stage) -> Any:
        key = _key(key)
        if key not in self._artifacts:
            raise MissingArtifactError(key)
        return self._artifacts[key]
