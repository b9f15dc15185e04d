import logging
import numpy as np
import time
import typing
from dataclasses import dataclass
from pentomino_tiler.board import Board, Placement, label_grid
from pentomino_tiler.utils.polyominos import PIECES, Coord, Piece

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class Solution:
    """
    A complete covering of a board, detached from the board it was found on.
    """
    width: int
    height: int
    placements: tuple[Placement, ...]

    def labels(self) -> np.ndarray:
        return label_grid(self.width, self.height, self.placements)

class Solver:
    """
    Backtracking search over a `Board`, always covering the lowest free cell (in row-major
    order) next.

    Every canonical orientation has its `(0, 0)` cell as the leftmost cell of its top row,
    so anchoring it at the lowest free cell covers that cell and nothing before it. Trying
    every unused piece in every orientation there therefore enumerates each covering exactly
    once.

    With `exhaustive=False`, a frame that completes the board returns straight away instead
    of trying its remaining pieces and orientations. With `limit`, the search stops once that
    many coverings have been accepted.
    """

    def __init__(
        self,
        board: Board,
        catalog: typing.Sequence[Piece],
        on_solution: typing.Callable[[Solution], typing.Any] | None = None,
        *,
        exhaustive: bool = True,
        limit: int | None = None,
    ):
        assert limit is None or limit > 0, f"Solution limit must be positive, got {limit}"
        assert len({piece.name for piece in catalog}) == len(catalog), "Piece names must be unique"

        self.board = board
        self.catalog = tuple(catalog)
        self.on_solution = on_solution
        self.exhaustive = exhaustive
        self.limit = limit

        self.used = [False] * len(self.catalog)
        self.count = 0

    def run(self) -> int:
        assert not self.board.placements, "The board must start out empty"

        first = self.board.next_free_cell((0, 0))
        if first is not None:
            self._search(first)
        return self.count

    def _accept(self) -> bool:
        """
        Records the current covering. Returns `False` once the solution limit is reached.
        """
        self.count += 1
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Solution %d: %s", self.count, " ".join(
                f"{p.piece.name}{p.orientation}@{p.origin}" for p in self.board.placements
            ))

        if self.on_solution is not None:
            self.on_solution(Solution(self.board.width, self.board.height, tuple(self.board.placements)))

        return self.limit is None or self.count < self.limit

    def _search(self, target: Coord) -> bool:
        """
        Tries every unused piece and orientation anchored at `target`.

        Returns `False` if the search as a whole should stop.
        """
        board = self.board

        for index, piece in enumerate(self.catalog):
            if self.used[index]:
                continue

            for orientation in range(len(piece.orientations)):
                if not board.place(target, piece, orientation):
                    continue

                self.used[index] = True

                next_target = board.next_free_cell(target)
                completed = next_target is None
                keep_going = self._accept() if completed else self._search(next_target)

                board.unplace()
                self.used[index] = False

                if not keep_going:
                    return False
                if completed and not self.exhaustive:
                    return True

        return True

def solve(
    board_width: int,
    board_height: int,
    catalog: typing.Sequence[Piece] = PIECES,
    emit_solution: typing.Callable[[Solution], typing.Any] | None = None,
    render: bool = False,
    *,
    exhaustive: bool = True,
    limit: int | None = None,
) -> int:
    """
    Counts the ways to tile a `board_width` x `board_height` board using every piece of
    `catalog` exactly once.

    If `render` is set, each covering is passed to `emit_solution` as it is found. A board
    whose area does not match the pieces has no coverings; this returns 0 rather than raising.
    """

    area = board_width * board_height
    if board_width <= 0 or board_height <= 0 or area != 5 * len(catalog):
        log.warning(
            "A %dx%d board (%d cells) cannot be tiled by %d pentominos (%d cells)",
            board_width, board_height, area, len(catalog), 5 * len(catalog),
        )
        return 0

    board = Board(board_width, board_height)
    solver = Solver(
        board,
        catalog,
        emit_solution if render else None,
        exhaustive=exhaustive,
        limit=limit,
    )

    log.info(
        "Tiling a %dx%d board with %s",
        board_width, board_height, "".join(piece.name for piece in solver.catalog),
    )
    started = time.perf_counter()
    count = solver.run()
    log.info("Found %d solution(s) in %.2fs", count, time.perf_counter() - started)

    return count
