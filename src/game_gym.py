import gymnasium as gym
from gymnasium import spaces
import numpy as np

from game import GameSession
from game_config import ROWS, COLS
from grid import Direction
from random_source import NumpyRandomSource


# index in the Discrete(4) action space -> move
ACTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
MAX_TILE = 2 ** 17


class Game2048Env(gym.Env):
    """
    headless GameSession behind the gymnasium API

    scripts and smoke tests drive the same session the window uses:
    actions pick a direction, the observation is the board of tile values,
    and the reward is whatever the move scored. spawns come from the env's
    own `np_random`, so `reset(seed=...)` replays a game exactly.
    """

    metadata = {"render_modes": ["human"]}

    def __init__(self, rows=ROWS, cols=COLS):
        super().__init__()

        self.game = GameSession(rows, cols, NumpyRandomSource(self.np_random))

        self.action_space = spaces.Discrete(len(ACTIONS))
        self.observation_space = spaces.Box(
            low=0,
            high=MAX_TILE,
            shape=(rows, cols),
            dtype=np.int32
        )
        self.action_to_direction = dict(enumerate(ACTIONS))

        # slid board of the last move that changed anything
        self.last_afterstate = None

    def _get_observation(self):
        return np.array(self.game.grid.values(), dtype=np.int32)

    def get_afterstate(self, action):
        """
        slide a copy of the board without spawning

        returns (board, points, valid); board is None when the move is a no-op
        """
        trial = self.game.grid.copy()
        moved, points = trial.slide_and_merge(self.action_to_direction[action])
        if not moved:
            return None, 0, False
        return np.array(trial.values(), dtype=np.int32), points, True

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        # a new seed means a new np_random, the session has to follow it
        self.game.random_source = NumpyRandomSource(self.np_random)
        self.game.restart()
        self.last_afterstate = None

        return self._get_observation(), {"score": self.game.score, "high_score": self.game.high_score}

    def step(self, action):
        afterstate_board, _, valid = self.get_afterstate(action)
        moved, points = self.game.apply_move(self.action_to_direction[action])

        if valid:
            self.last_afterstate = afterstate_board

        info = {
            "score": self.game.score,
            "high_score": self.game.high_score,
            "moved": moved,
            "points_gained": points,
            "afterstate": afterstate_board,
            "max_tile": self.game.max_tile(),
        }
        reward = float(points) if moved else 0.0
        return self._get_observation(), reward, self.game.is_game_over(), False, info

    def render(self, mode="human"):
        if mode == "human":
            self.game.print_board()
