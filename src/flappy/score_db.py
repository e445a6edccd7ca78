"""
score_db.py: Database layer for the high score and the ranking table.
"""

import sqlite3
from typing import List, Sequence

from .constants import DB_FILE, HIGH_SCORE_KEY
from .data_models import RankingEntry


class Database:
    """Handles all interaction with the SQLite database."""
    def __init__(self, db_file: str = DB_FILE):
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates tables if they don't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Records (
                key TEXT PRIMARY KEY,
                value INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Ranking (
                position INTEGER PRIMARY KEY,
                name TEXT NOT NULL,
                score INTEGER NOT NULL
            )
        """)
        self.conn.commit()

    def get_high_score(self) -> int:
        """Returns the stored high score, 0 if none was saved yet."""
        self.cur.execute("SELECT value FROM Records WHERE key=?", (HIGH_SCORE_KEY,))
        row = self.cur.fetchone()
        return max(0, row[0]) if row else 0

    def set_high_score(self, value: int):
        self.cur.execute(
            "INSERT INTO Records (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value=excluded.value",
            (HIGH_SCORE_KEY, int(value)))
        self.conn.commit()

    def load_ranking(self) -> List[RankingEntry]:
        """Fetches the ranking in its stored order."""
        self.cur.execute("SELECT name, score FROM Ranking ORDER BY position")
        return [RankingEntry(name=name, score=score) for name, score in self.cur.fetchall()]

    def save_ranking(self, entries: Sequence[RankingEntry]):
        """Replaces the stored ranking with `entries`, keeping their order."""
        with self.conn:
            self.conn.execute("DELETE FROM Ranking")
            self.conn.executemany(
                "INSERT INTO Ranking (position, name, score) VALUES (?, ?, ?)",
                [(i, e.name, e.score) for i, e in enumerate(entries)])

    def close(self):
        self.conn.close()
