"""
core game logic and mechanics
"""
import copy

from board import Board
from tile import Side

# reaching this tile wins (and ends) the game
MAX_PIECE = 2048


class Game2048:
    """
    state of one 2048 game: the board, the score, the best score so far
    and whether the game has ended.

    placing new tiles is left to the caller (see spawn.py), this class only
    applies tilts and judges the result.
    """

    def __init__(self, size=4, max_piece=MAX_PIECE):
        """initialize an empty game on a size x size board"""
        self.board = Board(size)
        self.max_piece = max_piece
        self._score = 0
        self._max_score = 0
        self._game_over = False

    @classmethod
    def from_values(cls, raw_values, score=0, max_score=0, game_over=False,
                    max_piece=MAX_PIECE):
        """
        a game whose board is given as rows of values, top row first,
        0 for an empty cell (mostly for tests and replays)
        """
        game = cls(len(raw_values), max_piece)
        game.board = Board.from_values(raw_values)
        game._score = score
        game._max_score = max_score
        game._game_over = game_over
        return game

    @property
    def size(self):
        return self.board.size

    @property
    def score(self):
        return self._score

    @property
    def max_score(self):
        """best final score seen so far, updated when a game is found to be over"""
        return self._max_score

    @property
    def game_over(self):
        """true if no move is left or the winning tile is on the board"""
        self._check_game_over()
        if self._game_over:
            self._max_score = max(self._score, self._max_score)
        return self._game_over

    def tile(self, col, row):
        return self.board.tile(col, row)

    def clear(self):
        """empty the board and reset the score"""
        self._score = 0
        self._game_over = False
        self.board.clear()

    def add_tile(self, tile):
        """add TILE to the board, its cell must be empty"""
        self.board.add_tile(tile)
        self._check_game_over()

    def tilt(self, side):
        """
        tilt the board toward SIDE, return True if any tile moved

        - two adjacent tiles of the same value in the direction of motion
          merge into one tile of twice the value, which is added to the score
        - a tile produced by a merge does not merge again on the same tilt
        - with three equal tiles in a line, the leading two merge and the
          trailing one does not
        """
        changed = False
        size = self.board.size

        # every tilt becomes a tilt toward the top of the view
        self.board.set_viewing_perspective(side)
        try:
            for col in range(size):
                # highest row of this column that can still take a tile
                index = size - 1
                for row in range(size - 2, -1, -1):
                    next_tile = self.board.tile(col, row)
                    if next_tile is None:
                        continue

                    index_tile = self.board.tile(col, index)
                    if index_tile is None:
                        # slide; the cell may still take a merge from below
                        self.board.move(col, index, next_tile)
                        changed = True
                    elif index_tile.value == next_tile.value:
                        if self.board.move(col, index, next_tile):
                            self._score += 2 * next_tile.value
                        changed = True
                        # merged cell is done for this tilt
                        index -= 1
                    else:
                        index -= 1
                        # close the gap to the tile that blocks it
                        if index - row > 0:
                            self.board.move(col, index, next_tile)
                            changed = True
        finally:
            self.board.set_viewing_perspective(Side.NORTH)

        self._check_game_over()
        return changed

    def make_move(self, direction):
        """
        tilt toward DIRECTION ('up', 'down', 'left', 'right' or a Side)
        and return (moved, points gained)
        """
        side = direction if isinstance(direction, Side) else Side.from_direction(direction)
        if self._game_over:
            return False, 0

        before = self._score
        moved = self.tilt(side)
        return moved, self._score - before

    def max_tile(self):
        """value of the largest tile, 0 for an empty board"""
        return max((tile.value for tile in self.board if tile is not None), default=0)

    def copy(self):
        """independent copy of this game"""
        return copy.deepcopy(self)

    def _check_game_over(self):
        self._game_over = is_game_over(self.board, self.max_piece)

    def __eq__(self, other):
        if not isinstance(other, Game2048):
            return NotImplemented
        return (self.board == other.board
                and self._score == other._score
                and self._max_score == other._max_score
                and self._game_over == other._game_over)

    __hash__ = None

    def __str__(self):
        over = "over" if self._game_over else "not over"
        return f"{self.board}\n{self._score} (max: {self._max_score}) (game is {over})"

    def print_board(self):
        """print the board to console"""
        print(self)


def empty_space_exists(board):
    """true if at least one cell is empty"""
    return any(tile is None for tile in board)


def max_tile_exists(board, max_piece=MAX_PIECE):
    """true if some tile has reached the winning value"""
    return any(tile is not None and tile.value == max_piece for tile in board)


def at_least_one_move_exists(board):
    """true if there is an empty cell or two adjacent tiles of equal value"""
    if empty_space_exists(board):
        return True

    size = board.size
    for col in range(size):
        for row in range(size):
            value = board.tile(col, row).value
            # right and up neighbours cover every adjacent pair
            if col + 1 < size and board.tile(col + 1, row).value == value:
                return True
            if row + 1 < size and board.tile(col, row + 1).value == value:
                return True
    return False


def is_game_over(board, max_piece=MAX_PIECE):
    """true if the winning tile exists or no move is left"""
    return max_tile_exists(board, max_piece) or not at_least_one_move_exists(board)
