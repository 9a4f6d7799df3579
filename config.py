# Настройки игры
# Поле 20x20 клеток (для победы нужно заполнить всё поле змейкой)
GRID_CELLS = 20
CELL_PX = 24                     # размер клетки в пикселях
BOARD_PX = GRID_CELLS * CELL_PX  # 480
PANEL_WIDTH = 220                # панель справа: счёт, статус, рекорды

# Скорость: один тик движка каждые TICK_MS миллисекунд
TICK_MS = 120
FPS = 60  # частота перерисовки окна

# Цвета
BACKGROUND = (16, 16, 16)
PANEL = (40, 40, 40)
HEAD = (76, 175, 80)
BODY = (46, 125, 50)
FOOD = (231, 76, 60)
WHITE = (255, 255, 255)
GRAY = (150, 150, 150)
ERROR = (255, 90, 90)

# Таблица рекордов
LEADERBOARD_DB = "snake_scores.db"
LEADERBOARD_LIMIT = 5  # храним только топ-5

# Управление: имена клавиш pygame -> направление
KEY_DIRECTIONS = {
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
}
PAUSE_KEYS = ("space", "p")
RESTART_KEYS = ("r",)
