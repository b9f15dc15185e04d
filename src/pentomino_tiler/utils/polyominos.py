from dataclasses import dataclass

type Coord = tuple[int, int]
type Shape = tuple[Coord, ...]
type Colour = tuple[int, int, int]
type Matrix = tuple[tuple[int, int], tuple[int, int]]

"""
The eight symmetries of the square as integer matrices `((a, b), (c, d))`, mapping `(x, y)`
to `(a*x + b*y, c*x + d*y)`: the identity, the three rotations, then four reflections.
"""
TRANSFORMS: tuple[Matrix, ...] = (
    ((1, 0), (0, 1)),
    ((0, -1), (1, 0)),
    ((-1, 0), (0, -1)),
    ((0, 1), (-1, 0)),
    ((-1, 0), (0, 1)),
    ((0, -1), (-1, 0)),
    ((1, 0), (0, -1)),
    ((0, 1), (1, 0)),
)

def canonicalize(cells) -> Shape:
    """
    Sorts the cells by row, then column, and translates them so that the leftmost cell
    of the topmost row is `(0, 0)`.

    Cells on later rows may end up with negative x coordinates; this is what lets a solver
    anchor any orientation at the first free cell of a board.
    """
    ordered = sorted(cells, key=lambda cell: (cell[1], cell[0]))
    anchor_x, anchor_y = ordered[0]
    return tuple((x - anchor_x, y - anchor_y) for x, y in ordered)

def transform(cells, n: int) -> Shape:
    assert 0 <= n < len(TRANSFORMS), f"Unknown transform index: {n}"
    (a, b), (c, d) = TRANSFORMS[n]
    return canonicalize((a * x + b * y, c * x + d * y) for x, y in cells)

def orientations(base) -> tuple[Shape, ...]:
    """
    All distinct canonical orientations of a shape, in the order they are first produced
    by `TRANSFORMS`.
    """
    return tuple(dict.fromkeys(transform(base, n) for n in range(len(TRANSFORMS))))

@dataclass(frozen=True)
class Piece:
    name: str
    colour: Colour
    orientations: tuple[Shape, ...]

    @staticmethod
    def from_base(name: str, colour: Colour, base) -> "Piece":
        return Piece(name, colour, orientations(base))

    @property
    def symmetry_order(self) -> int:
        """
        The number of symmetries of the square that map the piece onto itself.
        """
        return len(TRANSFORMS) // len(self.orientations)

    def __repr__(self) -> str:
        return f"Piece({self.name!r})"

def _pentominos() -> tuple[Piece, ...]:
    base = {
        "F": ((221, 187, 153), ((1, 0), (2, 0), (0, 1), (1, 1), (1, 2))),
        "I": ((238, 170, 170), ((0, 0), (0, 1), (0, 2), (0, 3), (0, 4))),
        "L": ((204, 204, 136), ((0, 0), (0, 1), (0, 2), (0, 3), (1, 3))),
        "N": ((170, 238, 170), ((1, 0), (1, 1), (0, 2), (1, 2), (0, 3))),
        "P": ((187, 221, 153), ((0, 0), (1, 0), (0, 1), (1, 1), (0, 2))),
        "T": ((153, 221, 187), ((0, 0), (1, 0), (2, 0), (1, 1), (1, 2))),
        "U": ((136, 204, 204), ((0, 0), (2, 0), (0, 1), (1, 1), (2, 1))),
        "V": ((153, 187, 221), ((0, 0), (0, 1), (0, 2), (1, 2), (2, 2))),
        "W": ((170, 170, 238), ((0, 0), (0, 1), (1, 1), (1, 2), (2, 2))),
        "X": ((187, 153, 221), ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2))),
        "Y": ((204, 136, 204), ((1, 0), (0, 1), (1, 1), (1, 2), (1, 3))),
        "Z": ((221, 153, 187), ((0, 0), (1, 0), (1, 1), (1, 2), (2, 2))),
    }

    return tuple(Piece.from_base(name, colour, cells) for name, (colour, cells) in base.items())

"""
The twelve free pentominos, in the fixed order the solver tries them.
"""
PIECES = _pentominos()

"""
A dictionary mapping pentomino names to their `Piece`.
"""
PENTOMINOS = { piece.name: piece for piece in PIECES }

def select(names: str) -> tuple[Piece, ...]:
    """
    The pieces with the given one-letter names (e.g. `"FILN"`), in catalog order.
    """
    for name in names:
        if name not in PENTOMINOS:
            raise KeyError(f"Unknown pentomino name: {name}")
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate pentomino names in {names!r}")
    return tuple(piece for piece in PIECES if piece.name in names)
