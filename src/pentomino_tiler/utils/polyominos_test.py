import pytest
import hypothesis
import hypothesis.strategies as st
from pentomino_tiler.utils.polyominos import (
    PENTOMINOS, PIECES, TRANSFORMS, canonicalize, orientations, select, transform
)

# INVERSE[n] undoes TRANSFORMS[n]: the two quarter turns swap, everything else is an involution.
INVERSE = (0, 3, 2, 1, 4, 5, 6, 7)

EXPECTED_ORIENTATION_COUNTS = {
    "F": 8, "I": 2, "L": 8, "N": 8, "P": 8, "T": 4,
    "U": 4, "V": 4, "W": 4, "X": 1, "Y": 8, "Z": 4,
}

shapes = st.sets(
    st.tuples(st.integers(-3, 3), st.integers(-3, 3)),
    min_size=5,
    max_size=5,
)

def test_catalog_order_and_orientation_counts():
    assert [piece.name for piece in PIECES] == list("FILNPTUVWXYZ")
    assert { piece.name: len(piece.orientations) for piece in PIECES } == EXPECTED_ORIENTATION_COUNTS
    assert sum(len(piece.orientations) for piece in PIECES) == 63

def test_symmetry_order():
    assert PENTOMINOS["F"].symmetry_order == 1
    assert PENTOMINOS["T"].symmetry_order == 2
    assert PENTOMINOS["I"].symmetry_order == 4
    assert PENTOMINOS["X"].symmetry_order == 8

@pytest.mark.parametrize("piece", PIECES, ids=lambda piece: piece.name)
def test_orientations_are_anchored(piece):
    for shape in piece.orientations:
        assert len(shape) == 5
        assert shape[0] == (0, 0)
        assert min(y for _, y in shape) == 0
        assert min(x for x, y in shape if y == 0) == 0
        assert list(shape) == sorted(shape, key=lambda cell: (cell[1], cell[0]))

@pytest.mark.parametrize("piece", PIECES, ids=lambda piece: piece.name)
def test_transform_and_inverse_round_trip(piece):
    base = piece.orientations[0]
    for n in range(len(TRANSFORMS)):
        assert set(transform(transform(base, n), INVERSE[n])) == set(canonicalize(base))

def test_anchor_is_leftmost_cell_of_top_row():
    # An upside-down L: the top row is a single cell on the right.
    assert canonicalize([(3, 0), (0, 1), (1, 1), (2, 1), (3, 1)]) == (
        (0, 0), (-3, 1), (-2, 1), (-1, 1), (0, 1)
    )

def test_orientations_keep_first_seen_order():
    v = orientations([(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)])
    assert v[0] == canonicalize([(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)])
    assert v == PENTOMINOS["V"].orientations

def test_unknown_transform_index_is_fatal():
    with pytest.raises(AssertionError):
        transform(PENTOMINOS["F"].orientations[0], 8)
    with pytest.raises(AssertionError):
        transform(PENTOMINOS["F"].orientations[0], -1)

def test_select():
    assert [piece.name for piece in select("ZFI")] == ["F", "I", "Z"]
    with pytest.raises(KeyError):
        select("FQ")
    with pytest.raises(ValueError):
        select("FF")

@hypothesis.given(shapes)
def test_orientations_form_an_orbit(cells):
    found = orientations(cells)

    assert len(set(found)) == len(found)
    assert len(TRANSFORMS) % len(found) == 0

    # Transforming any orientation gives back one of the orientations.
    for shape in found:
        assert shape[0] == (0, 0)
        for n in range(len(TRANSFORMS)):
            assert transform(shape, n) in found

@hypothesis.given(shapes, st.integers(-5, 5), st.integers(-5, 5))
def test_canonical_form_ignores_translation_and_order(cells, dx, dy):
    moved = [(x + dx, y + dy) for x, y in reversed(sorted(cells))]
    assert canonicalize(moved) == canonicalize(cells)
