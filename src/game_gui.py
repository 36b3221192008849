import argparse
import sys

import pygame

from game import GameSession
from game_config import (
    ROWS, COLS, SCREEN_WIDTH, SCREEN_HEIGHT, GRID_WIDTH, GRID_HEIGHT, HEADER_HEIGHT,
    CELL_MARGIN, FPS, COLORS, tile_color, text_color,
)
from grid import Direction
from random_source import RandomSource


RESTART = 'restart'
QUIT = 'quit'

# keyboard -> session commands, any other key is ignored
KEY_COMMANDS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_r: RESTART,
    pygame.K_ESCAPE: QUIT,
}


def command_for_key(key):
    """map a pygame key to a Direction, RESTART, QUIT or None"""
    return KEY_COMMANDS.get(key)


class AppContext:
    """everything the GUI owns: window, clock, fonts and the game session"""

    def __init__(self, session, screen=None, clock=None, fonts=None):
        self.session = session
        self.screen = screen
        self.clock = clock
        self.fonts = fonts or {}
        self.running = True

        # cell size follows the board shape
        self.cell_width = (GRID_WIDTH - (session.grid.cols + 1) * CELL_MARGIN) // session.grid.cols
        self.cell_height = (GRID_HEIGHT - (session.grid.rows + 1) * CELL_MARGIN) // session.grid.rows


def app_init(rows=ROWS, cols=COLS, seed=None):
    """create the window and a fresh game session"""
    pygame.init()

    session = GameSession(rows, cols, RandomSource(seed))

    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("2048")

    fonts = {
        'large': pygame.font.Font(None, 64),
        'medium': pygame.font.Font(None, 48),
        'small': pygame.font.Font(None, 28),
    }

    return AppContext(session, screen, pygame.time.Clock(), fonts)


def handle_event(ctx, event):
    """
    apply one pygame event to the context

    returns False once the app should stop
    """
    if event.type == pygame.QUIT:
        ctx.running = False
    elif event.type == pygame.KEYDOWN:
        command = command_for_key(event.key)
        if command == QUIT:
            ctx.running = False
        elif command == RESTART:
            ctx.session.restart()
            print("Game restarted!")
        elif isinstance(command, Direction):
            was_over = ctx.session.is_game_over()
            moved, _ = ctx.session.apply_move(command)
            if moved and not was_over and ctx.session.is_game_over():
                print(f"Game over! Score: {ctx.session.score}")
    return ctx.running


def draw(ctx):
    """draw one frame from the session snapshot"""
    snapshot = ctx.session.snapshot()

    # clear screen with background color
    ctx.screen.fill(COLORS['background'])

    draw_header(ctx, snapshot)

    # draw the grid background
    grid_rect = pygame.Rect(0, HEADER_HEIGHT, GRID_WIDTH, GRID_HEIGHT)
    pygame.draw.rect(ctx.screen, COLORS['grid_background'], grid_rect)

    for row, col, value in snapshot.tiles:
        draw_cell(ctx, row, col, value)

    pygame.display.flip()


def draw_header(ctx, snapshot):
    """score, best score and instructions"""
    score_text = ctx.fonts['medium'].render(
        f"Score: {snapshot.score}   Best: {snapshot.high_score}", True, COLORS['text_dark'])
    ctx.screen.blit(score_text, (20, 15))

    if snapshot.game_over:
        instruction_text = "Game Over! Press R to restart"
        color = COLORS['game_over']
    else:
        instruction_text = "Arrow keys to move, R to restart, ESC to quit"
        color = COLORS['text_dark']

    instruction_surface = ctx.fonts['small'].render(instruction_text, True, color)
    ctx.screen.blit(instruction_surface, (20, 65))


def draw_cell(ctx, row, col, value):
    """draw a single cell of the grid"""
    x = col * (ctx.cell_width + CELL_MARGIN) + CELL_MARGIN
    y = row * (ctx.cell_height + CELL_MARGIN) + CELL_MARGIN + HEADER_HEIGHT

    cell_rect = pygame.Rect(x, y, ctx.cell_width, ctx.cell_height)
    pygame.draw.rect(ctx.screen, tile_color(value), cell_rect, border_radius=8)

    if value == 0:
        return

    # choose font size based on number of digits
    if value < 100:
        font = ctx.fonts['large']
    elif value < 1000:
        font = ctx.fonts['medium']
    else:
        font = ctx.fonts['small']

    text_surface = font.render(str(value), True, text_color(value))
    text_rect = text_surface.get_rect()
    text_rect.center = (x + ctx.cell_width // 2, y + ctx.cell_height // 2)
    ctx.screen.blit(text_surface, text_rect)


def app_quit(ctx):
    ctx.running = False
    pygame.quit()


def run(ctx):
    """main loop"""
    print("2048 Game Started!")
    print("Use arrow keys to move tiles")
    print("Press R to restart, ESC to quit")
    print()

    while ctx.running:
        for event in pygame.event.get():
            if not handle_event(ctx, event):
                break

        draw(ctx)

        # frame rate
        ctx.clock.tick(FPS)

    print(f"Best score this session: {ctx.session.high_score}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="play 2048")
    parser.add_argument('--rows', type=int, default=ROWS, help="board rows")
    parser.add_argument('--cols', type=int, default=COLS, help="board columns")
    parser.add_argument('--seed', type=int, default=None, help="seed for tile spawning")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        ctx = app_init(args.rows, args.cols, args.seed)
        run(ctx)
        app_quit(ctx)
    except Exception as e:
        print(f"Error running game: {e}")
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
