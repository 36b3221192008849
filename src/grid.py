"""
grid of tiles and the slide/merge move mechanics
"""
import enum

from game_config import ROWS, COLS, START_TILES
from random_source import RandomSource
from tile import Tile


class Direction(enum.Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def vertical(self):
        """moves along columns instead of rows"""
        return self in (Direction.UP, Direction.DOWN)

    @property
    def toward_far_end(self):
        """target edge is the bottom / right side of the line"""
        return self in (Direction.DOWN, Direction.RIGHT)


def merge_line(values):
    """
    merge equal neighbours, scanning from the front of `values`

    args:
        values: non-zero tile values, leading edge first

    returns:
        merged: merged values (possibly shorter than the input)
        points: sum of all values created by merging
    """
    merged = []
    points = 0
    j = 0
    while j < len(values):
        if j < len(values) - 1 and values[j] == values[j + 1]:
            # merge the tiles
            merged_value = values[j] * 2
            merged.append(merged_value)
            points += merged_value
            j += 2  # skip the next tile since we merged it
        else:
            merged.append(values[j])
            j += 1
    return merged, points


def slide_line(line, toward_far_end=False):
    """
    slide and merge a single row or column

    returns the new line (same length as `line`) and the points earned
    """
    values = [v for v in line if v != 0]

    # always scan from the edge the tiles are moving toward
    if toward_far_end:
        values.reverse()
    merged, points = merge_line(values)
    if toward_far_end:
        merged.reverse()

    padding = [0] * (len(line) - len(merged))
    if toward_far_end:
        return padding + merged, points
    return merged + padding, points


class Grid:
    """
    ROWS x COLS board stored as a flat, row-major list of Tile objects

    tiles are created once and only their values change afterwards, so a
    move that changes nothing leaves every Tile exactly as it was.
    """

    def __init__(self, rows=ROWS, cols=COLS, random_source=None):
        if rows < 1 or cols < 1:
            raise ValueError(f"grid needs at least one row and column, got {rows}x{cols}")
        if rows * cols < START_TILES:
            raise ValueError(f"grid needs room for {START_TILES} starting tiles, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.random_source = random_source if random_source is not None else RandomSource()
        self.tiles = [Tile(r, c) for r in range(rows) for c in range(cols)]

    def size(self):
        return len(self.tiles)

    def index(self, row, col):
        return row * self.cols + col

    def tile_at(self, row, col):
        return self.tiles[self.index(row, col)]

    def values(self):
        """board values as a list of rows"""
        return [[self.tile_at(r, c).value for c in range(self.cols)] for r in range(self.rows)]

    def set_values(self, rows):
        """load a board layout given as a list of rows"""
        if len(rows) != self.rows or any(len(row) != self.cols for row in rows):
            raise ValueError(f"expected a {self.rows}x{self.cols} layout")
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                self.tile_at(r, c).value = int(value)

    def empty_cells(self):
        """empty tiles in row-major order"""
        return [tile for tile in self.tiles if tile.is_empty()]

    def max_value(self):
        return max(tile.value for tile in self.tiles)

    def total(self):
        return sum(tile.value for tile in self.tiles)

    def copy(self):
        """independent grid with the same values (shares the random source)"""
        clone = Grid(self.rows, self.cols, self.random_source)
        for tile, source in zip(clone.tiles, self.tiles):
            tile.value = source.value
        return clone

    def spawn_random_tile(self, value):
        """
        put `value` on a random empty cell

        returns False (and changes nothing) when the grid is full
        """
        empty = self.empty_cells()
        if not empty:
            return False
        tile = self.random_source.choice(empty)
        tile.value = value
        return True

    def restart(self):
        """clear every cell"""
        for tile in self.tiles:
            tile.value = 0

    def _line_positions(self, direction, i):
        """(row, col) pairs of line `i`, in board order"""
        if direction.vertical:
            return [(r, i) for r in range(self.rows)]
        return [(i, c) for c in range(self.cols)]

    def slide_and_merge(self, direction):
        """
        move all tiles toward `direction` and merge them

        returns:
            changed: if any tile moved or merged
            score_delta: points earned from merging
        """
        changed = False
        score_delta = 0
        n_lines = self.cols if direction.vertical else self.rows

        for i in range(n_lines):
            positions = self._line_positions(direction, i)
            line = [self.tile_at(r, c).value for r, c in positions]
            new_line, points = slide_line(line, direction.toward_far_end)
            score_delta += points

            # check if this line changed
            if new_line == line:
                continue
            changed = True
            for r, c in positions:
                self.tile_at(r, c).value = 0
            for (r, c), value in zip(positions, new_line):
                tile = self.tile_at(r, c)
                tile.row, tile.col = r, c
                tile.value = value

        return changed, score_delta

    def can_move(self, direction):
        """if a move in `direction` would change the grid (grid is not touched)"""
        changed, _ = self.copy().slide_and_merge(direction)
        return changed

    def has_legal_move(self):
        """check if any move is still possible"""
        if self.empty_cells():
            return True
        return any(self.can_move(direction) for direction in Direction)
