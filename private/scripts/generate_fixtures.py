#!/usr/bin/env python3
"""Generate the scramble-walk fixtures used by the solver tests.

Run from the project root after ``pip install -e .``::

    python private/scripts/generate_fixtures.py

Writes ``<project_root>/fixtures/3x3.json``.  Each entry stores the blank
walk that scrambles the solved board rather than the scrambled tiles, so a
test can rebuild the board through ``GamePlay`` and knows an upper bound on
the optimal solution length (the walk length).

Walks never undo their previous move and never return to the solved board,
and no two entries produce the same board.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path

from slidesolver.engine.gamegenerator import GameGenerator
from slidesolver.models.board import Board

# Resolve paths: this script lives in <project_root>/private/scripts/
SCRIPT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR.parent.parent
FIXTURES_DIR = PROJECT_ROOT / "fixtures"

SIZE = 3
# BFS and A* must both finish quickly at these depths.
WALK_LENGTHS: list[int] = [1, 1, 2, 3, 5, 8, 10, 12, 14, 16, 20]


# -- hashing / uniqueness ----------------------------------------------------


def _board_hash(board: Board) -> str:
    """SHA-256 of the flattened tile list — deterministic, order-sensitive."""
    return hashlib.sha256(str(board.flat()).encode()).hexdigest()


# -- walk generation ----------------------------------------------------------


def _generate_walk(length: int, seen: set[str]) -> list[str]:
    while True:
        board = GameGenerator.solved(SIZE)
        walk = GameGenerator.scramble(board, length)
        if board.is_solved():
            continue
        h = _board_hash(board)
        if h in seen:
            continue  # duplicate — regenerate
        seen.add(h)
        return [d.value for d in walk]


# -- main ---------------------------------------------------------------------


def main() -> None:
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
    seen: set[str] = set()

    entries = [
        {
            "id": f"walk_{SIZE}x{SIZE}_{i:02d}",
            "size": SIZE,
            "scramble": _generate_walk(length, seen),
        }
        for i, length in enumerate(WALK_LENGTHS, 1)
    ]

    path = FIXTURES_DIR / f"{SIZE}x{SIZE}.json"
    with open(path, "w") as f:
        f.write("[\n")
        f.write(",\n".join(json.dumps(e, separators=(",", ":")) for e in entries))
        f.write("\n]\n")
    print(f"  → {path.name}  ({len(entries)} walks) ✓")


if __name__ == "__main__":
    main()
