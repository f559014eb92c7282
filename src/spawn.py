"""
random tile spawning used by the drivers between moves
"""
import numpy as np

from tile import Tile

# chance that a new tile is a 2 (otherwise a 4)
TWO_PROBABILITY = 0.9
START_TILES = 2


def random_tile(board, rng=None):
    """a new 2 or 4 tile on a random empty cell of BOARD, None if the board is full"""
    if rng is None:
        rng = np.random.default_rng()

    empty_cells = board.empty_cells()
    if not empty_cells:
        return None

    col, row = empty_cells[rng.integers(len(empty_cells))]
    value = 2 if rng.random() < TWO_PROBABILITY else 4
    return Tile(value, col, row)


def add_random_tile(game, rng=None):
    """add a random tile (2 or 4) to an empty space, return it"""
    tile = random_tile(game.board, rng)
    if tile is not None:
        game.add_tile(tile)
    return tile


def new_game(game, rng=None):
    """clear GAME and place the starting tiles"""
    game.clear()
    for _ in range(START_TILES):
        add_random_tile(game, rng)
