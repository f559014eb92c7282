"""
square grid of tiles with a rotatable viewing perspective
"""
import numpy as np

from tile import Side, Tile


class OutOfRange(IndexError):
    """a (col, row) outside the board was used"""


class OccupiedCellError(ValueError):
    """a tile was added on top of another tile"""


class Board:
    """
    size x size grid of optional tiles

    coordinates are (col, row) with (0, 0) the bottom-left corner.
    tile() and move() read their coordinates through the current viewing
    perspective, so tilting toward any side can be written as tilting
    toward the top of the view. the stored tiles always carry their true
    board coordinates.
    """

    def __init__(self, size=4):
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self._size = size
        # _values[col][row]
        self._values = [[None] * size for _ in range(size)]
        self._perspective = Side.NORTH

    @classmethod
    def from_values(cls, raw_values):
        """
        build a board from a grid written the way it looks on screen:
        raw_values[0] is the top row, 0 marks an empty cell
        """
        size = len(raw_values)
        board = cls(size)
        for i, line in enumerate(raw_values):
            if len(line) != size:
                raise ValueError("raw values must describe a square grid")
            row = size - 1 - i
            for col, value in enumerate(line):
                if value:
                    board.add_tile(Tile(int(value), col, row))
        return board

    @property
    def size(self):
        return self._size

    @property
    def viewing_perspective(self):
        return self._perspective

    def set_viewing_perspective(self, side):
        """read all later (col, row) arguments as if SIDE were the top edge"""
        self._perspective = side

    def _check(self, col, row):
        if not (0 <= col < self._size and 0 <= row < self._size):
            raise OutOfRange(f"({col}, {row}) is outside a {self._size}x{self._size} board")

    def tile(self, col, row):
        """the tile at (col, row) under the current perspective, or None"""
        self._check(col, row)
        pcol, prow = self._perspective.logical_to_physical(col, row, self._size)
        return self._values[pcol][prow]

    def clear(self):
        """remove every tile"""
        for column in self._values:
            for row in range(self._size):
                column[row] = None
        self._perspective = Side.NORTH

    def add_tile(self, tile):
        """place TILE at its own board coordinates; the cell must be empty"""
        self._check(tile.col, tile.row)
        if self._values[tile.col][tile.row] is not None:
            raise OccupiedCellError(f"cell ({tile.col}, {tile.row}) already holds a tile")
        self._values[tile.col][tile.row] = tile

    def move(self, col, row, tile):
        """
        move TILE to (col, row) of the current view.

        returns True if the destination already held a tile, in which case
        the two are merged into one tile of twice the value. returns False
        for a plain slide.
        """
        self._check(col, row)
        pcol, prow = self._perspective.logical_to_physical(col, row, self._size)
        if (tile.col, tile.row) == (pcol, prow):
            return False
        if self._values[tile.col][tile.row] is not tile:
            raise ValueError(f"{tile} is not on the board")

        target = self._values[pcol][prow]
        self._values[tile.col][tile.row] = None
        if target is None:
            self._values[pcol][prow] = tile.moved_to(pcol, prow)
            return False
        if target.value != tile.value:
            # put the source back before failing
            self._values[tile.col][tile.row] = tile
            raise ValueError(f"cannot merge {tile.value} into {target.value}")
        self._values[pcol][prow] = tile.merged_to(pcol, prow)
        return True

    def __iter__(self):
        # reading order of the current view: top row first, left to right
        for row in range(self._size - 1, -1, -1):
            for col in range(self._size):
                yield self.tile(col, row)

    def empty_cells(self):
        """board coordinates of every empty cell"""
        return [
            (col, row)
            for col in range(self._size)
            for row in range(self._size)
            if self._values[col][row] is None
        ]

    def to_array(self):
        """board values as a numpy array in screen order (top row first), 0 for empty"""
        grid = np.zeros((self._size, self._size), dtype=np.int32)
        for col, column in enumerate(self._values):
            for row, tile in enumerate(column):
                if tile is not None:
                    grid[self._size - 1 - row, col] = tile.value
        return grid

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._values == other._values

    __hash__ = None

    def __str__(self):
        lines = []
        for row in range(self._size - 1, -1, -1):
            cells = []
            for col in range(self._size):
                tile = self._values[col][row]
                cells.append("    " if tile is None else f"{tile.value:4}")
            lines.append("|" + "|".join(cells) + "|")
        return "\n".join(lines)
