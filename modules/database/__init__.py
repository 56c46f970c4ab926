"""
Database Module for hoopstats
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Read-only access to the basketball statistics schema.
"""

__title__ = 'hoopstats database'
__license__ = 'None'
__version__ = '0.1.0'

from .database import Database, conn_params_from_env
from .base import (
    DatabaseError, DatabaseConnection, QueryRequest,
    query_db, is_select_query, contains_pattern
)
from .repositories import PlayersRepository, TeamsRepository, GamesRepository

__all__ = [
    'Database',
    'conn_params_from_env',
    'DatabaseError',
    'DatabaseConnection',
    'QueryRequest',
    'query_db',
    'is_select_query',
    'contains_pattern',
    'PlayersRepository',
    'TeamsRepository',
    'GamesRepository'
]

# Prevent direct execution
if __name__ == '__main__':
    print('This is not a standalone module.')
    raise SystemExit
