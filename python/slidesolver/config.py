"""Run configuration shared by the CLI and the terminal frontend."""

from __future__ import annotations

from dataclasses import dataclass

from slidesolver.engine.gamesolver import DEFAULT_MAX_DEPTH, Algorithm

DEFAULT_ALGORITHM = Algorithm.astar
DEFAULT_PLAYBACK_DELAY = 0.1  # seconds between replayed moves


@dataclass(frozen=True)
class SolverSettings:
    algorithm: Algorithm = DEFAULT_ALGORITHM
    max_depth: int = DEFAULT_MAX_DEPTH
    play: bool = False
    delay: float = DEFAULT_PLAYBACK_DELAY
