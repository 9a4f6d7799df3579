"""
SQLite таблица рекордов.
Храним только топ-N результатов: больше очков выше,
при равенстве выше тот, кто набрал раньше.

Использование:
    python leaderboard.py                  # Показать рекорды
    python leaderboard.py --db scores.db   # Другая база
    python leaderboard.py --clear          # Очистить таблицу
"""
import argparse
import sqlite3
import time

from config import LEADERBOARD_DB, LEADERBOARD_LIMIT


class Leaderboard:
    def __init__(self, db_path=LEADERBOARD_DB, limit=LEADERBOARD_LIMIT):
        self.db_path = db_path
        self.limit = limit
        self.conn = None
        self._init_db()

    def _init_db(self):
        """Инициализация базы данных"""
        self.conn = sqlite3.connect(self.db_path)
        cursor = self.conn.cursor()

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS scores (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                score INTEGER NOT NULL,
                timestamp INTEGER NOT NULL
            )
        ''')

        self.conn.commit()

    def record_score(self, name, score, timestamp=None):
        """Сохранить результат и обрезать таблицу до топ-N"""
        if not name or not name.strip():
            return False

        if timestamp is None:
            timestamp = int(time.time() * 1000)

        cursor = self.conn.cursor()
        cursor.execute('''
            INSERT INTO scores (name, score, timestamp)
            VALUES (?, ?, ?)
        ''', (name.strip(), int(score), int(timestamp)))

        # Всё, что не попало в топ, удаляем
        cursor.execute('''
            DELETE FROM scores WHERE id NOT IN (
                SELECT id FROM scores
                ORDER BY score DESC, timestamp ASC, id ASC
                LIMIT ?
            )
        ''', (self.limit,))
        self.conn.commit()
        return True

    def top(self, limit=None):
        """Рекорды в порядке мест: [(name, score, timestamp), ...]"""
        if limit is None:
            limit = self.limit

        cursor = self.conn.cursor()
        cursor.execute('''
            SELECT name, score, timestamp
            FROM scores
            ORDER BY score DESC, timestamp ASC, id ASC
            LIMIT ?
        ''', (limit,))
        return cursor.fetchall()

    def clear(self):
        """Удалить все рекорды"""
        cursor = self.conn.cursor()
        cursor.execute('DELETE FROM scores')
        self.conn.commit()

    def close(self):
        """Закрыть соединение"""
        if self.conn:
            self.conn.close()
            self.conn = None


def print_leaderboard(board):
    entries = board.top()
    if not entries:
        print("No scores yet.")
        return

    print(f"{'#':>2}  {'Name':<16} {'Score':>5}")
    for rank, (name, score, _) in enumerate(entries, start=1):
        print(f"{rank:>2}  {name:<16} {score:>5}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Snake leaderboard")
    parser.add_argument("--db", type=str, default=LEADERBOARD_DB,
                        help="Path to leaderboard database")
    parser.add_argument("--clear", action="store_true",
                        help="Remove all scores")
    args = parser.parse_args()

    board = Leaderboard(args.db)
    if args.clear:
        board.clear()
        print("Leaderboard cleared")
    else:
        print_leaderboard(board)
    board.close()
