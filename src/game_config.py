"""
game settings: board, spawning, window layout and colors
"""

# board
ROWS = 4
COLS = 4

# spawning
START_TILES = 2
START_VALUE = 2
SPAWN_VALUES = (2, 4)
SPAWN_WEIGHTS = (0.9, 0.1)  # 90% chance for 2 and 10% chance for 4
WIN_TILE = 2048

# window layout
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 900
GRID_WIDTH = 800
GRID_HEIGHT = 800
HEADER_HEIGHT = SCREEN_HEIGHT - GRID_HEIGHT
CELL_MARGIN = 10
FPS = 60


COLORS = {
    'background': (250, 248, 239),
    'grid_background': (187, 173, 160),
    'text_dark': (119, 110, 101),
    'text_light': (249, 246, 242),
    'game_over': (200, 0, 0),
    # tile colors
    0: (205, 193, 180),                   # empty cell
    2: (238, 228, 218),                   # light beige
    4: (237, 224, 200),                   # darker beige
    8: (242, 177, 121),                   # orange
    16: (245, 149, 99),                   # darker orange
    32: (246, 124, 95),                   # red-orange
    64: (246, 94, 59),                    # red
    128: (237, 207, 114),                 # yellow
}


def tile_color(value):
    """get background color for a tile value"""
    if value >= 128:
        return COLORS[128]
    return COLORS.get(value, COLORS[0])


def text_color(value):
    """get text color for a tile value"""
    if value <= 4:
        return COLORS['text_dark']
    return COLORS['text_light']
