"""
Контекст одной игровой сессии: текущее состояние, имя игрока, рекорды.
Вместо глобальных переменных всё хранится в объекте, которым владеет окно.
"""
from config import GRID_CELLS
import engine

NAME_REQUIRED = "Please enter your name."

STATUS_TEXT = {
    engine.PAUSED: "Paused",
    engine.GAMEOVER: "Game Over",
    engine.WIN: "You Win",
}


class GameSession:
    def __init__(self, grid_size=GRID_CELLS, leaderboard=None, rng=None):
        self.grid_size = grid_size
        self.leaderboard = leaderboard
        self.rng = rng
        self.player_name = ""
        self.started = False
        self.state = None
        self.games = 0

    def start(self, name):
        """Начать игру. Возвращает текст ошибки или None"""
        name = (name or "").strip()
        if not name:
            return NAME_REQUIRED

        self.player_name = name
        self.started = True
        self.reset()
        return None

    def reset(self):
        """Новая игра тем же игроком"""
        if not self.started:
            return
        self.state = engine.create_initial_state(self.grid_size, self.rng)

    def toggle_pause(self):
        if not self.started:
            return
        self.state = engine.toggle_pause(self.state)

    def change_direction(self, direction):
        # Повороты принимаем только во время игры
        if self.started and self.state.status == engine.PLAYING:
            self.state = engine.queue_direction(self.state, direction)

    def tick(self):
        """Один тик. Результат записывается ровно один раз за игру."""
        if not self.started or self.state is None:
            return self.state

        prev_status = self.state.status
        self.state = engine.step(self.state, self.rng)

        if prev_status == engine.PLAYING and self.state.status in engine.TERMINAL:
            self.games += 1
            if self.leaderboard is not None:
                self.leaderboard.record_score(self.player_name, self.state.score)

        return self.state

    def status_text(self):
        if self.state is None:
            return ""
        return STATUS_TEXT.get(self.state.status, "")
