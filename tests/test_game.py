"""
Tests for GameSession: scoring, spawning and restarting.
"""
from unittest import TestCase, main

from game import GameSession
from grid import Direction
from random_source import RandomSource


class ScriptedSource:
    """first empty cell for positions, a fixed value for weighted draws"""

    def __init__(self, spawn_value=2):
        self.spawn_value = spawn_value
        self.weighted_calls = []

    def choice(self, items):
        return items[0]

    def weighted_choice(self, items, weights):
        self.weighted_calls.append((tuple(items), tuple(weights)))
        return self.spawn_value


class TestGameSession(TestCase):
    def setUp(self):
        self.source = ScriptedSource()
        self.game = GameSession(random_source=self.source)

    def non_empty(self):
        return [tile for tile in self.game.grid.tiles if not tile.is_empty()]

    def test_init_places_two_tiles(self):
        tiles = self.non_empty()
        self.assertEqual(len(tiles), 2)
        self.assertTrue(all(tile.value == 2 for tile in tiles))
        self.assertEqual(self.game.score, 0)
        self.assertEqual(self.game.high_score, 0)

    def test_restart_keeps_high_score(self):
        self.game.grid.set_values([[2, 4, 8, 16]] * 4)
        self.game.score = 120
        self.game.high_score = 500

        self.game.restart()

        self.assertEqual(self.game.score, 0)
        self.assertEqual(self.game.high_score, 500)
        tiles = self.non_empty()
        self.assertEqual(len(tiles), 2)
        self.assertEqual({tile.value for tile in tiles}, {2})
        self.assertNotEqual((tiles[0].row, tiles[0].col), (tiles[1].row, tiles[1].col))

    def test_move_scores_and_spawns(self):
        self.game.grid.set_values([[0, 0, 2, 2], [0] * 4, [0] * 4, [0] * 4])
        self.source.spawn_value = 4

        moved, points = self.game.apply_move(Direction.LEFT)

        self.assertTrue(moved)
        self.assertEqual(points, 4)
        self.assertEqual(self.game.score, 4)
        self.assertEqual(self.game.high_score, 4)
        # new tile goes to the first empty cell
        self.assertEqual(self.game.grid.values()[0], [4, 4, 0, 0])
        self.assertEqual(self.source.weighted_calls[-1], ((2, 4), (0.9, 0.1)))

    def test_no_op_move(self):
        layout = [[2, 4, 0, 0], [0] * 4, [0] * 4, [0] * 4]
        self.game.grid.set_values(layout)
        self.game.score = 10
        self.game.high_score = 30

        for _ in range(2):
            self.assertEqual(self.game.apply_move(Direction.LEFT), (False, 0))
            self.assertEqual(self.game.grid.values(), layout)
            self.assertEqual(self.game.score, 10)
            self.assertEqual(self.game.high_score, 30)
        self.assertEqual(self.source.weighted_calls, [])

    def test_high_score_monotonic(self):
        game = GameSession(random_source=RandomSource(seed=2048))
        last_high = game.high_score
        directions = list(Direction)
        for step in range(300):
            game.apply_move(directions[step % 4])
            self.assertGreaterEqual(game.high_score, last_high)
            self.assertGreaterEqual(game.high_score, game.score)
            last_high = game.high_score
            if game.is_game_over():
                game.restart()

    def test_game_over(self):
        self.game.grid.set_values([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertTrue(self.game.is_game_over())
        self.assertEqual(self.game.apply_move(Direction.UP), (False, 0))
        self.assertTrue(self.game.snapshot().game_over)

    def test_reached_target(self):
        self.game.grid.set_values([[1024, 1024, 0, 0], [0] * 4, [0] * 4, [0] * 4])
        self.assertFalse(self.game.reached_target())
        self.game.apply_move(Direction.LEFT)
        self.assertTrue(self.game.reached_target())
        self.assertEqual(self.game.max_tile(), 2048)

    def test_snapshot(self):
        self.game.grid.set_values([[2, 0, 0, 0], [0] * 4, [0] * 4, [0, 0, 0, 8]])
        self.game.score = 12
        self.game.high_score = 40
        snapshot = self.game.snapshot()
        self.assertEqual(len(snapshot.tiles), 16)
        self.assertEqual(snapshot.tiles[0], (0, 0, 2))
        self.assertEqual(snapshot.tiles[15], (3, 3, 8))
        self.assertEqual(snapshot.score, 12)
        self.assertEqual(snapshot.high_score, 40)
        self.assertFalse(snapshot.game_over)

    def test_board_total_grows_only_by_new_tile(self):
        game = GameSession(random_source=RandomSource(seed=30))
        directions = list(Direction)
        for step in range(500):
            before = game.grid.total()
            moved, _ = game.apply_move(directions[step % 4])
            if moved:
                self.assertIn(game.grid.total() - before, (2, 4))
            else:
                self.assertEqual(game.grid.total(), before)
            if game.is_game_over():
                game.restart()

    def test_board_too_small(self):
        with self.assertRaises(ValueError):
            GameSession(1, 1)

    def test_seeded_sessions_match(self):
        first = GameSession(random_source=RandomSource(seed=5))
        second = GameSession(random_source=RandomSource(seed=5))
        for direction in [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN] * 5:
            first.apply_move(direction)
            second.apply_move(direction)
        self.assertEqual(first.grid.values(), second.grid.values())
        self.assertEqual(first.score, second.score)


if __name__ == '__main__':
    main()
