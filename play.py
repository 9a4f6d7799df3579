"""
Игра в змейку с клавиатуры.

Использование:
    python play.py                  # Ввести имя в окне
    python play.py --name Ilya      # Сразу начать игру
    python play.py --grid 15        # Поле 15x15
    python play.py --tick 90        # Быстрее (мс на тик)
"""
import argparse
import sqlite3

import pygame

import engine
from config import (GRID_CELLS, CELL_PX, PANEL_WIDTH, TICK_MS, FPS,
                    BACKGROUND, PANEL, HEAD, BODY, FOOD, WHITE, GRAY, ERROR,
                    LEADERBOARD_DB, KEY_DIRECTIONS, PAUSE_KEYS, RESTART_KEYS)
from leaderboard import Leaderboard
from session import GameSession

TICK_EVENT = pygame.USEREVENT + 1


class SnakeWindow:
    def __init__(self, session, tick_ms=TICK_MS, cell_px=CELL_PX):
        pygame.init()

        self.session = session
        self.tick_ms = tick_ms
        self.cell_px = cell_px
        self.board_px = cell_px * session.grid_size

        self.screen = pygame.display.set_mode((self.board_px + PANEL_WIDTH, self.board_px))
        pygame.display.set_caption('Snake')
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 28)

        # Экран ввода имени
        self.name_input = ""
        self.name_error = ""

    def draw_cell(self, x, y, color):
        """Клетка с отступом, чтобы сетка читалась"""
        padding = max(1, int(self.cell_px * 0.08))
        size = self.cell_px - padding * 2
        rect = pygame.Rect(x * self.cell_px + padding, y * self.cell_px + padding, size, size)
        pygame.draw.rect(self.screen, color, rect)

    def draw_board(self):
        pygame.draw.rect(self.screen, BACKGROUND, (0, 0, self.board_px, self.board_px))

        state = self.session.state
        if state is None:
            return

        grid = engine.to_grid(state)
        colors = {engine.BODY_CELL: BODY, engine.FOOD_CELL: FOOD, engine.HEAD_CELL: HEAD}
        for (y, x), cell in occupied_cells(grid):
            self.draw_cell(x, y, colors[cell])

    def draw_panel(self):
        panel = pygame.Rect(self.board_px, 0, PANEL_WIDTH, self.board_px)
        pygame.draw.rect(self.screen, PANEL, panel)

        state = self.session.state
        score = state.score if state else 0
        pause_label = "Resume" if state and state.status == engine.PAUSED else "Pause"

        lines = [
            (f"Player: {self.session.player_name}", WHITE),
            (f"Score: {score}", WHITE),
            (self.session.status_text(), ERROR),
            ("", WHITE),
            (f"SPACE/P: {pause_label}", GRAY),
            ("R: Restart", GRAY),
            ("Arrows/WASD: Move", GRAY),
            ("ESC: Quit", GRAY),
            ("", WHITE),
            ("--- Leaderboard ---", WHITE),
        ]

        entries = self.session.leaderboard.top() if self.session.leaderboard else []
        if not entries:
            lines.append(("No scores yet.", GRAY))
        for rank, (name, best, _) in enumerate(entries, start=1):
            lines.append((f"{rank}. {name[:12]}  {best}", WHITE))

        for i, (text, color) in enumerate(lines):
            if text:
                surf = self.font.render(text, True, color)
                self.screen.blit(surf, (self.board_px + 10, 20 + i * 24))

    def draw_name_prompt(self):
        """Окно ввода имени поверх поля"""
        center = self.board_px // 2
        title = self.big_font.render("Enter your name:", True, WHITE)
        self.screen.blit(title, title.get_rect(center=(center, center - 40)))

        text = self.big_font.render(self.name_input + "_", True, HEAD)
        self.screen.blit(text, text.get_rect(center=(center, center)))

        if self.name_error:
            err = self.font.render(self.name_error, True, ERROR)
            self.screen.blit(err, err.get_rect(center=(center, center + 40)))

    def draw(self):
        self.screen.fill(BACKGROUND)
        self.draw_board()
        self.draw_panel()
        if not self.session.started:
            self.draw_name_prompt()
        pygame.display.flip()

    def start(self, name):
        self.name_error = self.session.start(name) or ""
        if self.session.started:
            pygame.time.set_timer(TICK_EVENT, self.tick_ms)

    def handle_name_key(self, event):
        if event.key == pygame.K_RETURN:
            self.start(self.name_input)
        elif event.key == pygame.K_BACKSPACE:
            self.name_input = self.name_input[:-1]
        elif event.unicode and event.unicode.isprintable():
            self.name_input += event.unicode
            self.name_error = ""

    def handle_game_key(self, event):
        key = pygame.key.name(event.key)
        if key in KEY_DIRECTIONS:
            self.session.change_direction(KEY_DIRECTIONS[key])
        elif key in PAUSE_KEYS:
            self.session.toggle_pause()
        elif key in RESTART_KEYS:
            self.session.reset()

    def on_tick(self):
        prev = self.session.state.status
        state = self.session.tick()

        if prev == engine.PLAYING and state.status in engine.TERMINAL:
            result = "WIN!" if state.status == engine.WIN else f"Score {state.score}"
            print(f"Game {self.session.games} ({self.session.player_name}): {result}")

    def run(self):
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == TICK_EVENT:
                    self.on_tick()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif not self.session.started:
                        self.handle_name_key(event)
                    else:
                        self.handle_game_key(event)

            self.draw()
            self.clock.tick(FPS)

        pygame.time.set_timer(TICK_EVENT, 0)
        pygame.quit()


def occupied_cells(grid):
    """Непустые клетки матрицы мира: ((y, x), код)"""
    for y, x in zip(*grid.nonzero()):
        yield (int(y), int(x)), int(grid[y, x])


def open_leaderboard(db_path):
    try:
        return Leaderboard(db_path)
    except sqlite3.DatabaseError as e:
        print(f"Warning: could not open leaderboard {db_path}: {e}")
        print("Running without leaderboard.")
        return None


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--name", "-n", type=str, default=None,
                        help="Player name (skip the name prompt)")
    parser.add_argument("--grid", "-g", type=int, default=GRID_CELLS,
                        help="Grid size in cells")
    parser.add_argument("--tick", "-t", type=int, default=TICK_MS,
                        help="Milliseconds per tick")
    parser.add_argument("--db", type=str, default=LEADERBOARD_DB,
                        help="Path to leaderboard database")
    args = parser.parse_args()

    if args.grid < engine.MIN_GRID_SIZE:
        parser.error(f"--grid must be at least {engine.MIN_GRID_SIZE}")

    board = open_leaderboard(args.db)
    session = GameSession(grid_size=args.grid, leaderboard=board)
    window = SnakeWindow(session, tick_ms=args.tick)
    if args.name:
        window.start(args.name)
    window.run()

    if board is not None:
        board.close()
