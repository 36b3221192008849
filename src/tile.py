"""
single cell of the 2048 grid
"""


class Tile:
    """value of one cell plus the (row, col) it sits at; 0 means empty"""

    __slots__ = ('value', 'row', 'col')

    def __init__(self, row, col, value=0):
        self.row = row
        self.col = col
        self.value = value

    def is_empty(self):
        return self.value == 0

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return (self.row, self.col, self.value) == (other.row, other.col, other.value)

    def __repr__(self):
        return f"Tile(row={self.row}, col={self.col}, value={self.value})"
