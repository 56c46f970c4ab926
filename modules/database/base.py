"""
Database Module for hoopstats - Base Components
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Core database components: the query executor, the pooled connection and
the base repository.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
from modules.logging_config import DatabaseLogger


# Escape character used in every LIKE ... ESCAPE clause
LIKE_ESCAPE = '!'


class DatabaseError(Exception):
    """Custom exception for database operations."""
    pass


@dataclass(frozen=True)
class QueryRequest:
    """A query template with `?` placeholders and its positional bind values."""
    query: str
    params: Tuple[Any, ...] = ()


def is_select_query(query: str) -> bool:
    """True when 'select' starts within the first 6 characters of the trimmed query."""
    position = query.lstrip().lower().find('select')
    return 0 <= position < 6


def contains_pattern(term: str) -> str:
    """
    Wrap a search term for a substring LIKE match.

    LIKE metacharacters in the term are escaped with LIKE_ESCAPE so they
    match literally. Use together with ``LIKE ? ESCAPE '!'``.
    """
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace('%', LIKE_ESCAPE + '%')
        .replace('_', LIKE_ESCAPE + '_')
    )
    return f"%{escaped}%"


def query_db(conn, query: str, params: Sequence[Any] = ()) -> Union[List[Dict[str, Any]], int]:
    """
    Prepare and execute a query against an open connection.

    Args:
        conn: A DB-API connection whose ``cursor`` accepts ``dictionary=True``
        query: SQL with positional ``?`` placeholders
        params: Values bound to the placeholders, in order

    Returns:
        All rows as dicts for SELECT queries, otherwise the affected row count
    """
    cursor = conn.cursor(dictionary=True)
    try:
        cursor.execute(query, tuple(params))
        if is_select_query(query):
            return list(cursor.fetchall())
        conn.commit()
        return cursor.rowcount
    finally:
        cursor.close()


class DatabaseConnection:
    """Manages the database connection pool and runs queries through it."""

    def __init__(self, conn_params: Dict[str, Any], pool=None):
        self.db_logger = DatabaseLogger()
        self.logger = self.db_logger.logger

        if pool is None:
            self._validate_config(conn_params)
            conn_params = dict(conn_params)
            if not conn_params.get('pool_name'):
                conn_params['pool_name'] = 'hoopstats'
            import mariadb
            pool = mariadb.ConnectionPool(**conn_params)

        self.pool = pool

    def _validate_config(self, conn_params: Dict[str, Any]) -> None:
        """Validate database connection parameters."""
        required_keys = ['host', 'database', 'user', 'password']
        for key in required_keys:
            if conn_params.get(key) is None:
                raise KeyError(f'No {key.title()} provided for DB connection')

    @contextmanager
    def get_connection(self):
        """Context manager for pooled database connections."""
        conn = self.pool.get_connection()
        self.db_logger.log_connection('acquired')
        try:
            yield conn
        finally:
            conn.close()
            self.db_logger.log_connection('released')

    def run(self, request: QueryRequest) -> Union[List[Dict[str, Any]], int]:
        """Execute a QueryRequest; any driver failure is raised as DatabaseError."""
        self.db_logger.log_query(request.query, request.params)
        try:
            with self.get_connection() as conn:
                return query_db(conn, request.query, request.params)
        except Exception as e:
            self.db_logger.log_error('run', e)
            raise DatabaseError(f"Query execution failed: {e}") from e

    def health_check(self) -> bool:
        """Check database connection health."""
        try:
            self.run(QueryRequest("SELECT 1 AS ok"))
            return True
        except DatabaseError:
            return False


class BaseRepository(ABC):
    """Base class for the read-only table repositories."""

    def __init__(self, db_connection: DatabaseConnection, table_name: str):
        self.db = db_connection
        self.table = table_name
        self.logger = db_connection.logger

    def _fetch_all(self, query: str, params: Tuple = ()) -> List[Dict[str, Any]]:
        """Execute a query that returns multiple results."""
        results = self.db.run(QueryRequest(query, tuple(params)))
        self.logger.debug(f"Fetch all query executed, returned {len(results)} rows")
        return results

    def _fetch_one(self, query: str, params: Tuple = ()) -> Optional[Dict[str, Any]]:
        """Execute a query and return its first row, or None when there is none."""
        results = self._fetch_all(query, params)
        return results[0] if results else None

    def _fetch_scalar(self, query: str, params: Tuple = ()) -> Any:
        """Execute a query that returns a single value."""
        result = self._fetch_one(query, params)
        if result:
            return next(iter(result.values()))
        return None

    def _search_columns(self, select: str, columns: Sequence[str], term: str,
                        order_by: str) -> List[Dict[str, Any]]:
        """Match one term as a substring against several columns joined by OR."""
        conditions = " OR ".join(f"{column} LIKE ? ESCAPE '{LIKE_ESCAPE}'" for column in columns)
        query = f"{select} WHERE {conditions} ORDER BY {order_by}"
        pattern = contains_pattern(term)
        return self._fetch_all(query, (pattern,) * len(columns))

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[Dict[str, Any]]:
        """Get a record by its primary key."""
        pass

    @abstractmethod
    def search(self, term: str) -> List[Dict[str, Any]]:
        """Get all records matching a free-text term."""
        pass

    def count(self) -> int:
        """Get the total count of records."""
        query = f"SELECT COUNT(*) AS total FROM {self.table}"
        return self._fetch_scalar(query) or 0
