"""
Database Repositories for hoopstats
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Read-only repository classes for the player, team and game tables.
"""

from typing import Dict, List, Optional, Any
from .base import BaseRepository


class PlayersRepository(BaseRepository):
    """Repository for player table."""

    DETAIL_SELECT = """
        SELECT p.playerID AS playerID, p.fname AS fname, p.lname AS lname,
               p.dob, p.height, p.weight, p.position, p.teamID AS teamID,
               p.mpg, p.ppg, p.rpg, p.apg, p.spg, p.bpg, p.fg,
               t.name AS teamname
        FROM player p
        LEFT JOIN team t ON p.teamID = t.teamID
    """

    SEARCH_SELECT = """
        SELECT p.*, t.name AS teamname
        FROM player p
        LEFT JOIN team t ON p.teamID = t.teamID
    """

    def __init__(self, db_connection):
        super().__init__(db_connection, 'player')

    def get_by_id(self, player_id: str) -> Optional[Dict[str, Any]]:
        """Get a player, with the team's display name, by its player ID."""
        query = f"{self.DETAIL_SELECT} WHERE p.playerID = ?"
        return self._fetch_one(query, (player_id,))

    def search(self, term: str) -> List[Dict[str, Any]]:
        """Find players whose first name, last name or team name contains the term."""
        return self._search_columns(
            self.SEARCH_SELECT,
            ['p.fname', 'p.lname', 't.name'],
            term,
            order_by='p.lname, p.fname, p.playerID'
        )


class TeamsRepository(BaseRepository):
    """Repository for team table."""

    def __init__(self, db_connection):
        super().__init__(db_connection, 'team')

    def get_by_id(self, team_id: str) -> Optional[Dict[str, Any]]:
        """Get a team by its team ID."""
        query = f"SELECT * FROM {self.table} WHERE teamID = ?"
        return self._fetch_one(query, (team_id,))

    def search(self, term: str) -> List[Dict[str, Any]]:
        """Find teams whose name, city or team ID contains the term."""
        return self._search_columns(
            f"SELECT * FROM {self.table}",
            ['name', 'city', 'teamID'],
            term,
            order_by='name, teamID'
        )


class GamesRepository(BaseRepository):
    """Repository for game table."""

    def __init__(self, db_connection):
        super().__init__(db_connection, 'game')

    def get_by_id(self, game_id: str) -> Optional[Dict[str, Any]]:
        """Get a game by its game ID."""
        query = f"SELECT * FROM {self.table} WHERE gameID = ?"
        return self._fetch_one(query, (game_id,))

    def search(self, term: str) -> List[Dict[str, Any]]:
        """Find games whose date, away team or home team contains the term."""
        return self._search_columns(
            f"SELECT * FROM {self.table}",
            ['date', 'awayteamID', 'hometeamID'],
            term,
            order_by='date, gameID'
        )
