"""Random-move scrambles for the 3x3 cube."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

__all__ = ["FACES", "SUFFIXES", "generate_scramble"]

FACES: Sequence[str] = ("U", "D", "L", "R", "F", "B")
SUFFIXES: Sequence[str] = ("", "'", "2")

_AXIS = {"U": 0, "D": 0, "L": 1, "R": 1, "F": 2, "B": 2}


def _allowed(face: str, previous: List[str]) -> bool:
    if previous and previous[-1] == face:
        return False
    # U D U style sequences collapse to fewer moves.
    if len(previous) >= 2 and _AXIS[previous[-1]] == _AXIS[previous[-2]] == _AXIS[face]:
        return False
    return True


def generate_scramble(length: int = 20, *, rng: Optional[random.Random] = None) -> str:
    """Return ``length`` space-separated face turns.

    No face is turned twice in a row and no axis is used three times in a row.
    """

    if length < 1:
        raise ValueError("scramble length must be positive")
    chooser = rng or random.Random()
    faces: List[str] = []
    moves: List[str] = []
    while len(moves) < length:
        face = chooser.choice(FACES)
        if not _allowed(face, faces):
            continue
        faces.append(face)
        moves.append(face + chooser.choice(SUFFIXES))
    return " ".join(moves)
