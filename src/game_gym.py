import gymnasium as gym
from gymnasium import spaces
import numpy as np

from game import MAX_PIECE, Game2048
from spawn import add_random_tile, new_game
from tile import Side


class Game2048Env(gym.Env):
    """
    gymnasium environment for 2048 game

    afterstate framework:
    - observation is the board after the random tile was placed
    - afterstate is the board after the move, before the random tile
    """

    metadata = {"render_modes": ["human"]}

    def __init__(self, size=4, max_piece=MAX_PIECE):
        super().__init__()

        self.game = Game2048(size, max_piece)

        # actions -> 4 possible moves
        # 0 = up, 1 = down, 2 = left, 3 = right
        self.action_space = spaces.Discrete(4)

        # observation space -> size x size grid of raw tile values
        self.observation_space = spaces.Box(
            low=0,
            high=131072,  # up to 131072 tile (not reaching here anyways)
            shape=(size, size),
            dtype=np.int32
        )

        # map actions to the side the board is tilted toward
        self.action_to_side = {
            0: Side.NORTH,
            1: Side.SOUTH,
            2: Side.WEST,
            3: Side.EAST
        }

        # track afterstate (board after move, before random tile)
        self.last_afterstate = None

    def _get_observation(self):
        """board as a size x size array, top row first"""
        return self.game.board.to_array()

    def _side(self, action):
        try:
            return self.action_to_side[int(action)]
        except KeyError:
            raise ValueError(f"Invalid action {action!r}, must be 0-3") from None

    def get_afterstate(self, action):
        """
        get the afterstate: board after move but before random tile

        args:
            action: 0=up, 1=down, 2=left, 3=right

        returns:
            afterstate_board: board after move (before random tile), None if invalid
            reward: points earned from merging
            valid: if the move changed the board
        """
        side = self._side(action)

        # simulate on a copy, nothing is spawned here
        temp_game = self.game.copy()
        before = temp_game.score
        if not temp_game.tilt(side):
            return None, 0, False

        return temp_game.board.to_array(), temp_game.score - before, True

    def reset(self, seed=None, options=None):
        """reset the game to start a new episode"""
        super().reset(seed=seed)

        new_game(self.game, self.np_random)
        self.last_afterstate = None

        observation = self._get_observation()
        info = {"score": self.game.score}

        return observation, info

    def step(self, action):
        """
        take one step in the environment

        the reward is the points gained by merging, 0 for a move that
        changed nothing
        """
        side = self._side(action)

        before = self.game.score
        moved = self.game.tilt(side)
        points = self.game.score - before

        afterstate_board = None
        if moved:
            afterstate_board = self.game.board.to_array()
            self.last_afterstate = afterstate_board
            add_random_tile(self.game, self.np_random)

        reward = float(points)
        observation = self._get_observation()

        terminated = self.game.game_over
        truncated = False

        info = {
            "score": self.game.score,
            "max_score": self.game.max_score,
            "moved": moved,
            "points_gained": points,
            "afterstate": afterstate_board,
            "max_tile": self.game.max_tile()
        }

        return observation, reward, terminated, truncated, info

    def render(self):
        """display the game state"""
        self.game.print_board()

    def close(self):
        """nothing to clean up"""
        pass
