"""Pairing structures produced by the matcher."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class MatchSide(enum.Enum):
    PROBE = "probe"
    CANDIDATE = "candidate"


@dataclass(frozen=True)
class MinutiaPair:
    probe: int
    candidate: int

    def side(self, side: MatchSide) -> int:
        return self.probe if side is MatchSide.PROBE else self.candidate


@dataclass(frozen=True)
class EdgePair:
    start: MinutiaPair
    end: MinutiaPair


@dataclass(frozen=True)
class PairingGraph:
    root: MinutiaPair
    tree: tuple[EdgePair, ...] = ()
    support: tuple[EdgePair, ...] = ()
