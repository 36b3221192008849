"""
core game logic and mechanics
"""
from collections import namedtuple

from game_config import (
    ROWS, COLS, START_TILES, START_VALUE, SPAWN_VALUES, SPAWN_WEIGHTS, WIN_TILE,
)
from grid import Grid


# read-only view of a session, polled by the GUI once per frame
Snapshot = namedtuple('Snapshot', ['tiles', 'score', 'high_score', 'game_over'])


class GameSession:
    def __init__(self, rows=ROWS, cols=COLS, random_source=None):
        """initialize a 2048 game (4x4 by default) and place the starting tiles"""
        self.grid = Grid(rows, cols, random_source)
        self.score = 0
        self.high_score = 0

        self.restart()

    @property
    def random_source(self):
        return self.grid.random_source

    @random_source.setter
    def random_source(self, source):
        self.grid.random_source = source

    def apply_move(self, direction):
        """
        make a move in the specified direction

        a move that changes nothing does not score and does not spawn a tile
        """
        moved, points = self.grid.slide_and_merge(direction)

        if moved:
            self.score += points
            if self.score > self.high_score:
                self.high_score = self.score
            new_value = self.random_source.weighted_choice(SPAWN_VALUES, SPAWN_WEIGHTS)
            self.grid.spawn_random_tile(new_value)

        return moved, points

    def restart(self):
        """reset the game, keeping the high score"""
        self.grid.restart()
        self.score = 0
        for _ in range(START_TILES):
            self.grid.spawn_random_tile(START_VALUE)

    def is_game_over(self):
        """check if game is over (no more moves possible)"""
        return not self.grid.has_legal_move()

    def reached_target(self, target=WIN_TILE):
        return self.grid.max_value() >= target

    def max_tile(self):
        return self.grid.max_value()

    def snapshot(self):
        tiles = tuple((tile.row, tile.col, tile.value) for tile in self.grid.tiles)
        return Snapshot(tiles, self.score, self.high_score, self.is_game_over())

    def print_board(self):
        """print the board to console"""
        width = 5 * self.grid.cols + 1
        print(f"Score: {self.score}  Best: {self.high_score}")
        print("-" * width)
        for row in self.grid.values():
            print("|", end="")
            for cell in row:
                if cell == 0:
                    print("    |", end="")
                else:
                    print(f"{cell:4}|", end="")
            print()
        print("-" * width)
        if self.is_game_over():
            print("GAME OVER!")
        print()
