"""
Database Module for hoopstats - Main Database Class
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Main database interface that provides access to all repositories.
"""

import os
from typing import Dict, Any, Optional
from .base import DatabaseConnection
from .repositories import PlayersRepository, TeamsRepository, GamesRepository


def conn_params_from_env() -> Dict[str, Any]:
    """Build MariaDB connection parameters from the DB_* environment variables."""
    return {
        "database": os.getenv('DB_DATABASE'),
        "user": os.getenv('DB_USER'),
        "password": os.getenv('DB_PASS'),
        "host": os.getenv('DB_HOST'),
        "port": int(os.getenv('DB_PORT', 3306))
    }


class Database:
    """
    Main database interface for hoopstats.

    Example:
        conn_params = {
            'host': 'localhost',
            'database': 'basketball',
            'user': 'username',
            'password': 'password'
        }

        db = Database(conn_params)

        team = db.teams.get_by_id('BOS')
        players = db.players.search('Jo')
    """

    def __init__(self, conn_params: Optional[Dict[str, Any]] = None, pool=None):
        """
        Initialize the database connection and repositories.

        Args:
            conn_params: Database connection parameters
            pool: An already constructed connection pool to use instead
        """
        self.connection = DatabaseConnection(conn_params or {}, pool=pool)

        self.players = PlayersRepository(self.connection)
        self.teams = TeamsRepository(self.connection)
        self.games = GamesRepository(self.connection)

    def health_check(self) -> bool:
        """Check if database connection is healthy."""
        return self.connection.health_check()

    def get_stats(self) -> Dict[str, int]:
        """Get database statistics."""
        return {
            'players': self.players.count(),
            'teams': self.teams.count(),
            'games': self.games.count()
        }


__all__ = ['Database', 'conn_params_from_env']
