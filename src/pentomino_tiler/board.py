import numpy as np
from dataclasses import dataclass
from pentomino_tiler.utils.polyominos import Coord, Piece

"""
Width of the permanently occupied margin to the right of and below the board.

Every pentomino orientation reaches at most 4 cells away from its anchor, so no placement
anchored on the board can index past the margin.
"""
SPAN = 4

@dataclass(frozen=True)
class Placement:
    origin: Coord
    piece: Piece
    orientation: int

    def cells(self):
        ox, oy = self.origin
        return ((ox + x, oy + y) for x, y in self.piece.orientations[self.orientation])

def label_grid(width: int, height: int, placements) -> np.ndarray:
    """
    Returns a `(height, width)` array holding the name of the piece covering each cell,
    or the empty string for uncovered cells.
    """
    labels = np.full((height, width), "", dtype="U8")
    for placement in placements:
        for x, y in placement.cells():
            labels[y, x] = placement.piece.name
    return labels

class Board:
    """
    A `width` x `height` occupancy grid with a stack of active placements.

    Cells are stored row-major in a flat buffer with rows `width + SPAN` long and `SPAN`
    extra rows at the bottom, all of them marked occupied. A cell `(x, y)` lives at
    `y * stride + x`, so a negative x offset on a lower row of a piece lands in the right
    margin of the row above it, and anything spilling off the right or bottom edge lands in
    the margin too. Either way the ordinary occupancy check rejects it.
    """

    def __init__(self, width: int, height: int):
        assert width > 0 and height > 0, f"Board dimensions must be positive, got {width}x{height}"

        self.width = width
        self.height = height
        self.stride = width + SPAN

        self._cells = bytearray(b"\x01") * ((height + SPAN) * self.stride)

        # A writable view sharing memory with `self._cells`.
        self.occupied: np.ndarray = np.frombuffer(self._cells, dtype=np.bool_).reshape(
            height + SPAN, self.stride
        )
        self.occupied[:height, :width] = False

        self.placements: list[Placement] = []
        self._offsets: dict[tuple[Piece, int], tuple[int, ...]] = {}

    def _offsets_for(self, piece: Piece, orientation: int) -> tuple[int, ...]:
        key = (piece, orientation)
        offsets = self._offsets.get(key)
        if offsets is None:
            assert 0 <= orientation < len(piece.orientations), (
                f"Piece {piece.name} has no orientation {orientation}"
            )
            offsets = tuple(y * self.stride + x for x, y in piece.orientations[orientation])
            self._offsets[key] = offsets
        return offsets

    def _base(self, origin: Coord) -> int:
        x, y = origin
        assert 0 <= x < self.width and 0 <= y < self.height, (
            f"Origin {origin} is outside the {self.width}x{self.height} board"
        )
        return y * self.stride + x

    def place(self, origin: Coord, piece: Piece, orientation: int) -> bool:
        """
        Places the given orientation of `piece` with its `(0, 0)` cell at `origin`.

        Returns `False`, leaving the board untouched, if any of its cells is already occupied
        or falls outside the board.
        """
        base = self._base(origin)
        offsets = self._offsets_for(piece, orientation)
        cells = self._cells

        for offset in offsets:
            if cells[base + offset]:
                return False

        for offset in offsets:
            cells[base + offset] = 1

        self.placements.append(Placement(origin, piece, orientation))
        return True

    def unplace(self) -> Placement:
        """
        Removes the most recent placement and frees its cells.
        """
        assert self.placements, "unplace() called without an active placement"

        placement = self.placements.pop()
        base = self._base(placement.origin)
        for offset in self._offsets_for(placement.piece, placement.orientation):
            self._cells[base + offset] = 0
        return placement

    def next_free_cell(self, cursor: Coord) -> Coord | None:
        """
        Returns the first free cell at or after `cursor` in row-major order, or `None` if the
        rest of the board is covered.
        """
        x, y = cursor
        assert 0 <= x < self.width and 0 <= y < self.height, (
            f"Cursor {cursor} is outside the {self.width}x{self.height} board"
        )

        for row in range(y, self.height):
            start = row * self.stride
            index = self._cells.find(0, start + x, start + self.width)
            if index != -1:
                return (index - start, row)
            x = 0

        return None

    def is_full(self) -> bool:
        return not (~self.occupied[:self.height, :self.width]).any()

    def snapshot(self) -> np.ndarray:
        """
        A copy of the whole occupancy array, margin included.
        """
        return self.occupied.copy()

    def labels(self) -> np.ndarray:
        return label_grid(self.width, self.height, self.placements)
