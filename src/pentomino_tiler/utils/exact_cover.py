"""
The tiling problem as a `cpmpy` constraint model, independent of the backtracking solver.

Each piece chooses exactly one of its in-bounds placements; the cells it covers form a
`BoolGrid`, and the piece grids must be disjoint and together cover the whole board.
"""

import cpmpy as cp
import typing
from pentomino_tiler.board import Placement
from pentomino_tiler.utils.grids import BoolGrid
from pentomino_tiler.utils.polyominos import PIECES, Piece
import pentomino_tiler.utils.cp as cpx

def candidate_placements(width: int, height: int, piece: Piece) -> list[Placement]:
    """
    Every placement of `piece` that lies entirely on a `width` x `height` board.
    """
    return [
        Placement((x, y), piece, orientation)
        for orientation, shape in enumerate(piece.orientations)
        for y in range(height)
        for x in range(width)
        if all(0 <= x + dx < width and 0 <= y + dy < height for dx, dy in shape)
    ]

class TilingModel:
    def __init__(self, width: int, height: int, catalog: typing.Sequence[Piece] = PIECES):
        assert len(catalog) > 0, "At least one piece is required"

        model = cp.Model()
        self.model = model
        self.width = width
        self.height = height
        self.choices: list[list[tuple[typing.Any, Placement]]] = []
        self.grids: list[BoolGrid] = []

        for piece in catalog:
            placements = candidate_placements(width, height, piece)
            chosen = [cp.boolvar(name=f"{piece.name}_{n}") for n in range(len(placements))]
            model += cpx.exactly_one(chosen)

            covered_by: dict[tuple[int, int], list] = {}
            for var, placement in zip(chosen, placements):
                for x, y in placement.cells():
                    covered_by.setdefault((y, x), []).append(var)

            grid = BoolGrid(model, height, width)
            model += grid.each_eq(lambda i, j: cpx.sum(covered_by.get((i, j), [])))

            self.choices.append(list(zip(chosen, placements)))
            self.grids.append(grid)

        model += BoolGrid.are_disjoint(self.grids)
        model += BoolGrid.union(self.grids).is_full

    def count(self, limit: int | None = None) -> int:
        return self.model.solveAll(solution_limit=limit)

    def solution(self) -> tuple[Placement, ...] | None:
        if not self.model.solve():
            return None

        return tuple(
            placement
            for choices in self.choices
            for var, placement in choices
            if var.value()
        )

def count_tilings(
    width: int,
    height: int,
    catalog: typing.Sequence[Piece] = PIECES,
    *,
    limit: int | None = None,
) -> int:
    if width <= 0 or height <= 0 or width * height != 5 * len(catalog):
        return 0
    return TilingModel(width, height, catalog).count(limit)
