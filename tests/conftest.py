from __future__ import annotations

import os
import sqlite3
import tempfile
from pathlib import Path
from typing import Any

import pytest

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="hoopstats-logs-"))

from modules.database import Database  # noqa: E402

SCHEMA = """
CREATE TABLE team (
    teamID TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    city TEXT,
    conference TEXT
);

CREATE TABLE player (
    playerID INTEGER PRIMARY KEY,
    fname TEXT NOT NULL,
    lname TEXT NOT NULL,
    dob TEXT,
    height TEXT,
    weight INTEGER,
    position TEXT,
    teamID TEXT REFERENCES team(teamID),
    mpg REAL, ppg REAL, rpg REAL, apg REAL, spg REAL, bpg REAL, fg REAL
);

CREATE TABLE game (
    gameID INTEGER PRIMARY KEY,
    date TEXT NOT NULL,
    hometeamID TEXT REFERENCES team(teamID),
    awayteamID TEXT REFERENCES team(teamID),
    homescore INTEGER,
    awayscore INTEGER
);
"""

TEAMS = [
    ("TA", "TeamA", "Boston", "East"),
    ("TB", "TeamB", "Denver", "West"),
    ("TC", "TeamC", "Chicago", "East"),
    ("TD", "100% Ballers", "New_Town", "West"),
]

PLAYERS = [
    (1, "John", "Smith", "1990-04-02", "6-6", 215, "SF", "TA", 31.2, 18.4, 5.1, 3.3, 1.2, 0.4, 46.1),
    (2, "Amy", "Jones", "1993-09-17", "6-1", 170, "PG", "TB", 28.0, 12.9, 3.0, 7.8, 1.9, 0.1, 43.5),
    (3, "Carl", "Lee", "1988-01-30", "7-0", 260, "C", "TC", 24.5, 10.2, 9.8, 1.1, 0.5, 2.2, 55.0),
    (4, "Shaquille", "O'Neal", "1972-03-06", "7-1", 325, "C", "TD", 35.0, 28.7, 13.6, 3.1, 0.6, 2.8, 57.4),
]

GAMES = [
    (1, "2016-11-02", "TA", "TB", 101, 99),
    (2, "2016-12-25", "TC", "TA", 88, 95),
    (3, "2017-01-15", "TB", "TD", 110, 104),
]


def _dict_row(cursor: sqlite3.Cursor, row: tuple) -> dict[str, Any]:
    return {column[0]: value for column, value in zip(cursor.description, row)}


class RecordingCursor:
    """sqlite3 cursor that records each statement the way the pool sees it."""

    def __init__(self, cursor: sqlite3.Cursor, pool: "SQLitePool") -> None:
        self._cursor = cursor
        self._pool = pool

    def execute(self, query: str, params: tuple = ()) -> None:
        self._pool.executed.append((query, tuple(params)))
        if self._pool.broken:
            raise sqlite3.OperationalError("server has gone away")
        self._cursor.execute(query, params)

    def fetchall(self) -> list[dict[str, Any]]:
        return self._cursor.fetchall()

    @property
    def rowcount(self) -> int:
        return self._cursor.rowcount

    def close(self) -> None:
        self._cursor.close()


class SQLiteConnection:
    def __init__(self, path: Path, pool: "SQLitePool") -> None:
        self._conn = sqlite3.connect(path)
        self._conn.row_factory = _dict_row
        self._pool = pool

    def cursor(self, dictionary: bool = False) -> RecordingCursor:
        assert dictionary, "rows are always fetched as dicts"
        return RecordingCursor(self._conn.cursor(), self._pool)

    def commit(self) -> None:
        self._conn.commit()

    def close(self) -> None:
        self._pool.released += 1
        self._conn.close()


class SQLitePool:
    """Stands in for mariadb.ConnectionPool over a file-backed SQLite database."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.executed: list[tuple[str, tuple]] = []
        self.broken = False
        self.released = 0

    def get_connection(self) -> SQLiteConnection:
        return SQLiteConnection(self.path, self)


@pytest.fixture()
def pool(tmp_path: Path) -> SQLitePool:
    path = tmp_path / "basketball.db"
    conn = sqlite3.connect(path)
    conn.executescript(SCHEMA)
    conn.executemany("INSERT INTO team VALUES (?, ?, ?, ?)", TEAMS)
    conn.executemany(
        "INSERT INTO player VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)", PLAYERS
    )
    conn.executemany("INSERT INTO game VALUES (?, ?, ?, ?, ?, ?)", GAMES)
    conn.commit()
    conn.close()
    return SQLitePool(path)


@pytest.fixture()
def db(pool: SQLitePool) -> Database:
    return Database(pool=pool)
