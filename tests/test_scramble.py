from __future__ import annotations

import random

import pytest

from cubetimer.scramble import FACES, SUFFIXES, generate_scramble

_AXES = ({"U", "D"}, {"L", "R"}, {"F", "B"})


def _axis(face: str) -> int:
    return next(index for index, axis in enumerate(_AXES) if face in axis)


@pytest.mark.parametrize("length", [1, 2, 20, 25])
def test_scramble_has_requested_length(length: int) -> None:
    moves = generate_scramble(length, rng=random.Random(length)).split()

    assert len(moves) == length
    for move in moves:
        assert move[0] in FACES
        assert move[1:] in SUFFIXES


@pytest.mark.parametrize("seed", range(20))
def test_scramble_avoids_redundant_turns(seed: int) -> None:
    faces = [move[0] for move in generate_scramble(40, rng=random.Random(seed)).split()]

    for previous, current in zip(faces, faces[1:]):
        assert previous != current
    for first, second, third in zip(faces, faces[1:], faces[2:]):
        assert not _axis(first) == _axis(second) == _axis(third)


def test_scramble_is_reproducible_with_seeded_rng() -> None:
    assert generate_scramble(20, rng=random.Random(3)) == generate_scramble(
        20, rng=random.Random(3)
    )


@pytest.mark.parametrize("length", [0, -4])
def test_scramble_rejects_non_positive_length(length: int) -> None:
    with pytest.raises(ValueError):
        generate_scramble(length)
