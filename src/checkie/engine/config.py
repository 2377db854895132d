"""Rating configuration for the evaluator and the search.

Weights can be loaded from a TOML file::

    win = 1000.0
    max_depth = 3

    [material]
    pawn = 1.0
    queen = 3.0

    [position]
    pawn = 0.5
    queen = 1.5

    [captures]
    pawn = 10.0
    queen = 30.0
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from checkie.core.enums import PieceType

_LOGGER = logging.getLogger(__name__)

_WEIGHT_TABLES = ("material", "position", "captures")
_SCALARS = ("win", "max_depth")


@dataclass(frozen=True, slots=True)
class KindWeights:
    """One weight per piece kind."""

    pawn: float
    queen: float

    def __getitem__(self, piece_type: PieceType) -> float:
        return self.pawn if piece_type == PieceType.PAWN else self.queen

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], base: KindWeights) -> KindWeights:
        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown piece kinds: {', '.join(sorted(unknown))}")
        return replace(base, **{k: float(v) for k, v in data.items()})


@dataclass(frozen=True, slots=True)
class RateConfig:
    """Scoring weights, decisive-score magnitude and search horizon.

    Args:
        material: Value of each piece kind on the board.
        position: Pawn weight per row advanced; queen weight per step
            towards the center on each axis.
        captures: Bonus for each capture a piece threatens, by the kind
            of the threatened piece.
        win: Score of a decided game. Must exceed any static score.
        max_depth: Search horizon in full turns.
    """

    material: KindWeights = field(default_factory=lambda: KindWeights(1.0, 3.0))
    position: KindWeights = field(default_factory=lambda: KindWeights(0.0, 0.0))
    captures: KindWeights = field(default_factory=lambda: KindWeights(10.0, 30.0))
    win: float = 1000.0
    max_depth: int = 3

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError("Search depth must be >= 0")
        if self.win <= 0:
            raise ValueError("Win score must be positive")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RateConfig:
        """Build a config from nested mappings, keeping defaults for gaps."""
        unknown = set(data) - set(_WEIGHT_TABLES) - set(_SCALARS)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        cfg = cls()
        changes: dict[str, Any] = {}
        for name in _WEIGHT_TABLES:
            if name in data:
                changes[name] = KindWeights.from_mapping(data[name], getattr(cfg, name))
        if "win" in data:
            changes["win"] = float(data["win"])
        if "max_depth" in data:
            changes["max_depth"] = int(data["max_depth"])
        return replace(cfg, **changes)


def load_rate_config(path: str | Path) -> RateConfig:
    """Read a :class:`RateConfig` from a TOML file; defaults if it is missing."""
    path = Path(path)
    if not path.is_file():
        _LOGGER.warning("Config file not found, using defaults: %s", path)
        return RateConfig()
    with path.open("rb") as f:
        raw = tomllib.load(f)
    return RateConfig.from_mapping(raw)
