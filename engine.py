"""
Движок змейки на клеточном поле.

Все функции чистые: принимают состояние, возвращают новое.
Старое состояние никогда не меняется. Случайность передаётся
явно через rng (функция без аргументов, число в [0, 1)).

Матрица мира (to_grid):
  0 = пусто
  1 = тело змейки
  2 = еда
  7 = голова
"""
import math
import numbers
from collections import namedtuple

import numpy as np

from config import GRID_CELLS

# Направления: (dx, dy), ось y смотрит вниз
DIRS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

OPPOSITE = {
    "up": "down",
    "down": "up",
    "left": "right",
    "right": "left",
}

# Статусы игры
PLAYING = "playing"
PAUSED = "paused"
GAMEOVER = "gameover"
WIN = "win"
TERMINAL = frozenset((GAMEOVER, WIN))

INITIAL_SNAKE_LENGTH = 3
# Змейка стоит по центру (mid = n // 2) и уходит хвостом влево до mid - 2
MIN_GRID_SIZE = 4

EMPTY_CELL = 0
BODY_CELL = 1
FOOD_CELL = 2
HEAD_CELL = 7


GameState = namedtuple("GameState", [
    "grid_size",
    "snake",             # кортеж (x, y), голова первая
    "direction",
    "queued_direction",  # направление, которое применится на следующем тике
    "food",              # (x, y) или None, если поле заполнено
    "score",
    "status",
])


def _default_rng(rng):
    return np.random.random if rng is None else rng


def opposite(direction):
    """Противоположное направление (None для неизвестного)"""
    return OPPOSITE.get(direction)


def create_initial_state(grid_size=GRID_CELLS, rng=None):
    """
    Новая игра: змейка из 3 клеток по центру, голова справа,
    движение вправо, одна еда на свободной клетке.
    """
    if isinstance(grid_size, bool) or not isinstance(grid_size, numbers.Integral):
        raise ValueError(f"grid_size must be an integer, got {grid_size!r}")
    if grid_size < MIN_GRID_SIZE:
        raise ValueError(
            f"grid_size must be at least {MIN_GRID_SIZE}, got {grid_size}")

    grid_size = int(grid_size)
    rng = _default_rng(rng)
    mid = grid_size // 2
    snake = tuple((mid - i, mid) for i in range(INITIAL_SNAKE_LENGTH))

    return GameState(
        grid_size=grid_size,
        snake=snake,
        direction="right",
        queued_direction=None,
        food=place_food(grid_size, snake, rng),
        score=0,
        status=PLAYING,
    )


def queue_direction(state, direction):
    """
    Запомнить желание игрока повернуть.
    Применится на следующем тике; разворот на 180° игнорируется.
    """
    try:
        if direction not in DIRS:
            return state
    except TypeError:  # нехешируемый мусор вместо направления
        return state

    current = state.queued_direction or state.direction

    if direction == current:
        return state

    # Разворот назад = мгновенная смерть о собственную шею
    if OPPOSITE[direction] == current:
        return state

    return state._replace(queued_direction=direction)


def toggle_pause(state):
    """Пауза / продолжение. После конца игры ничего не делает."""
    if state.status == PLAYING:
        return state._replace(status=PAUSED)
    if state.status == PAUSED:
        return state._replace(status=PLAYING)
    return state


def step(state, rng=None):
    """Один тик игры"""
    if state.status != PLAYING:
        return state

    direction = state.queued_direction or state.direction
    dx, dy = DIRS[direction]
    head_x, head_y = state.snake[0]
    new_head = (head_x + dx, head_y + dy)
    grid_size = state.grid_size

    # Стена
    if not (0 <= new_head[0] < grid_size and 0 <= new_head[1] < grid_size):
        return state._replace(
            direction=direction, queued_direction=None, status=GAMEOVER)

    assert state.food is None or state.food not in state.snake, \
        "food placed on the snake"

    hit_food = state.food is not None and new_head == state.food

    # Хвост освобождает клетку, если змейка не растёт на этом тике
    body = state.snake if hit_food else state.snake[:-1]
    if new_head in body:
        return state._replace(
            direction=direction, queued_direction=None, status=GAMEOVER)

    food = state.food
    score = state.score
    status = state.status

    if hit_food:
        snake = (new_head,) + state.snake
        score += 1

        # Победа: свободных клеток не осталось
        if len(snake) == grid_size * grid_size:
            status = WIN
            food = None
        else:
            food = place_food(grid_size, snake, _default_rng(rng))
    else:
        snake = (new_head,) + state.snake[:-1]

    return state._replace(
        snake=snake,
        direction=direction,
        queued_direction=None,
        food=food,
        score=score,
        status=status,
    )


def place_food(grid_size, snake, rng=None):
    """
    Случайная свободная клетка, равновероятно среди всех свободных.
    Обход по строкам (y, потом x). None, если свободных клеток нет.
    """
    rng = _default_rng(rng)
    occupied = set(snake)
    available = grid_size * grid_size - len(occupied)

    if available <= 0:
        return None

    target = math.floor(rng() * available)
    count = 0

    for y in range(grid_size):
        for x in range(grid_size):
            if (x, y) in occupied:
                continue
            if count == target:
                return (x, y)
            count += 1

    return None


def to_grid(state):
    """Матрица мира [y, x] для отрисовки и проверок"""
    grid = np.zeros((state.grid_size, state.grid_size), dtype=np.int8)

    for x, y in state.snake[1:]:
        grid[y, x] = BODY_CELL
    if state.food is not None:
        fx, fy = state.food
        grid[fy, fx] = FOOD_CELL
    hx, hy = state.snake[0]
    grid[hy, hx] = HEAD_CELL

    return grid
