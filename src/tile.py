"""
tiles and the four viewing perspectives of the board
"""
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Tile:
    """a single numbered tile sitting at (col, row); row 0 is the bottom edge"""
    value: int
    col: int
    row: int

    def __post_init__(self):
        # positive power of two
        if self.value <= 0 or self.value & (self.value - 1):
            raise ValueError(f"tile value must be a positive power of two, got {self.value}")
        if self.col < 0 or self.row < 0:
            raise ValueError(f"tile position must be non-negative, got ({self.col}, {self.row})")

    def moved_to(self, col, row):
        """same tile slid to (col, row)"""
        return Tile(self.value, col, row)

    def merged_to(self, col, row):
        """the tile produced when this tile merges with an equal one at (col, row)"""
        return Tile(self.value * 2, col, row)


class Side(Enum):
    """
    the side of the board that faces "up" in a viewing perspective

    each member stores (col0, row0, dcol, drow) which drive the
    logical <-> physical coordinate remap
    """
    NORTH = (0, 0, 0, 1)
    EAST = (0, 1, 1, 0)
    SOUTH = (1, 1, 0, -1)
    WEST = (1, 0, -1, 0)

    def __init__(self, col0, row0, dcol, drow):
        self.col0 = col0
        self.row0 = row0
        self.dcol = dcol
        self.drow = drow

    def logical_to_physical(self, col, row, size):
        """board (col, row) of the cell seen at (col, row) from this side"""
        last = size - 1
        physical_col = last * self.col0 + col * self.drow + row * self.dcol
        physical_row = last * self.row0 - col * self.dcol + row * self.drow
        return physical_col, physical_row

    def physical_to_logical(self, col, row, size):
        """inverse of logical_to_physical"""
        # the rotation matrix is orthogonal, so its inverse is its transpose
        last = size - 1
        col -= last * self.col0
        row -= last * self.row0
        logical_col = col * self.drow - row * self.dcol
        logical_row = col * self.dcol + row * self.drow
        return logical_col, logical_row

    @property
    def opposite(self):
        return _OPPOSITES[self]

    @classmethod
    def from_direction(cls, direction):
        """map a direction name ('up', 'right', 'down', 'left') to a side"""
        try:
            return _DIRECTIONS[direction.lower()]
        except (KeyError, AttributeError):
            raise ValueError(
                f"Invalid direction {direction!r}. Must be 'up', 'down', 'left', or 'right'"
            ) from None


_OPPOSITES = {
    Side.NORTH: Side.SOUTH,
    Side.SOUTH: Side.NORTH,
    Side.EAST: Side.WEST,
    Side.WEST: Side.EAST,
}

_DIRECTIONS = {
    'up': Side.NORTH,
    'right': Side.EAST,
    'down': Side.SOUTH,
    'left': Side.WEST,
}
