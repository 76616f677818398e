"""
=================================
Database: entry point for chains.
=================================

Opens one connection on construction and shares it with every statement
started from the instance. The builder never alters the connection; it only
hands it to the gateway when a statement is executed.

Example:
    >>> from builder import Database
    >>> 
    >>> with Database('localhost', 'root', 'secret', 'shop') as db:
    ...     db.insert('customers').object({'name': 'Ada', 'active': 1}).execute()
    ...     rows = db.select(['id', 'name']).from_('customers').where('active=1').execute()
"""

import logging
from typing import Iterable, Optional, Union

from builder.states import (
    DeleteFrom,
    InsertInto,
    SelectColumns,
    UpdateTable,
    delete,
    insert,
    select,
    update,
)
from core.config import Config, config
from utils.database_utils import DatabaseConnectionError, close_connection, connect

logger = logging.getLogger(__name__)


class Database:
    """Connected statement factory.
    
    Attributes:
        host: Database server hostname
        user: Database username
        database: Database name
    
    Raises:
        DatabaseConnectionError: From the constructor when connecting fails.
            The message never contains the password.
    """
    
    def __init__(
        self,
        host: str,
        user: str,
        password: str,
        database: str,
        port: Optional[int] = None,
        drivername: Optional[str] = None,
        connect_timeout: Optional[int] = None
    ):
        self.host = host
        self.user = user
        self.database = database
        self._connection = connect(
            host=host,
            user=user,
            password=password,
            database=database,
            port=port,
            drivername=drivername,
            connect_timeout=connect_timeout
        )
    
    @classmethod
    def from_config(cls, settings: Optional[Config] = None) -> "Database":
        """Connect using the environment-driven configuration."""
        settings = settings or config
        return cls(
            connect_timeout=settings.db_connect_timeout,
            **settings.get_connection_params()
        )
    
    def _open_connection(self):
        """Return the connection shared by every statement.
        
        Raises:
            DatabaseConnectionError: If close() has already been called
        """
        if self._connection is None:
            raise DatabaseConnectionError("Database connection is closed")
        return self._connection
    
    def select(self, columns: Union[str, Iterable[str]]) -> SelectColumns:
        """Start a SELECT; columns may be a sequence or a pre-joined string such as '*'."""
        return select(self._open_connection(), columns)
    
    def insert(self, table: str) -> InsertInto:
        return insert(self._open_connection(), table)
    
    def update(self, table: str) -> UpdateTable:
        return update(self._open_connection(), table)
    
    def delete(self, table: str) -> DeleteFrom:
        return delete(self._open_connection(), table)
    
    def close(self) -> None:
        """Close the shared connection. Safe to call more than once."""
        if self._connection is not None:
            close_connection(self._connection)
            self._connection = None
            logger.info(f"Closed connection to database '{self.database}' on {self.host}")
    
    def __enter__(self) -> "Database":
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False
    
    def __repr__(self) -> str:
        status = "connected" if self._connection is not None else "closed"
        return f"Database(host='{self.host}', user='{self.user}', database='{self.database}', {status})"
