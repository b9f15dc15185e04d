import cpmpy as cp
import numpy as np
import typing
from cpmpy.expressions.variables import NDVarArray
from functools import cached_property
import pentomino_tiler.utils.cp as cpx

class BoolGrid:
    """
    A `height` x `width` grid of boolean decision variables belonging to `model`.
    """

    def __init__(self, model: cp.Model, height: int, width: int):
        self.model = model
        self.height = height
        self.width = width
        self.cells: NDVarArray = cp.boolvar(shape=(height, width))  # type: ignore

    def __getitem__(self, idx) -> typing.Any:
        return self.cells[idx]

    def indices(self):
        return ((i, j) for i in range(self.height) for j in range(self.width))

    @staticmethod
    def _grid_list_helper(grids: typing.Sequence["BoolGrid"]) -> "BoolGrid":
        """
        Ensures that a given non-empty list of grids share a model and dimensions,
        and returns one of the grids.
        """

        assert len(grids) > 0, "At least one grid is required"

        proto = grids[0]
        assert all(grid.model is proto.model for grid in grids), (
            "All grids must belong to the same model"
        )
        assert all(grid.height == proto.height and grid.width == proto.width for grid in grids), (
            "All grids must have the same dimensions"
        )

        return proto

    def value(self) -> np.ndarray:
        return self.cells.value().astype(bool)

    def each_eq(self, fn: typing.Callable[[int, int], typing.Any]):
        """
        Returns a decision variable that is true iff every cell equals the value returned by
        the given function for its coordinates.
        """
        return cpx.all(
            self[i, j] == fn(i, j)
            for i, j in self.indices()
        )

    @cached_property
    def popcount(self):
        return cpx.sum(self[i, j] for i, j in self.indices())

    @cached_property
    def is_full(self):
        """
        Returns a decision variable that is true iff every cell of the grid is true.
        """
        return self.popcount == self.height * self.width

    @staticmethod
    def are_disjoint(grids: typing.Sequence["BoolGrid"]):
        """
        Returns a decision variable that is true iff no cell is true in more than one of the grids.
        """

        proto = BoolGrid._grid_list_helper(grids)

        return cpx.all(
            cpx.sum(grid[i, j] for grid in grids) <= 1
            for i, j in proto.indices()
        )

    @staticmethod
    def union(grids: typing.Sequence["BoolGrid"]) -> "BoolGrid":
        """
        Returns a new `BoolGrid` that is the cellwise logical or of the given grids.
        """

        proto = BoolGrid._grid_list_helper(grids)

        union_grid = BoolGrid(proto.model, proto.height, proto.width)

        proto.model += cpx.all(
            union_grid[i, j] == cp.any([grid[i, j] for grid in grids])
            for i, j in proto.indices()
        )

        return union_grid
