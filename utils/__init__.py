"""
==========================
Utility Functions Package.
==========================

Database connectivity for the query builder: connecting, executing
assembled statements and checking availability.

Modules:
    database_utils: SQLAlchemy connection gateway and health checks
"""

__version__ = "1.0.0"
__all__ = [
    'DatabaseConnectionError',
    'StatementExecutionError',
    'ResultSet',
    'connect',
    'execute_statement',
    'close_connection',
    'redact_password',
    'get_connection_url',
    'create_sqlalchemy_engine',
    'check_database_available',
    'wait_for_database'
]

from .database_utils import (
    DatabaseConnectionError,
    ResultSet,
    StatementExecutionError,
    check_database_available,
    close_connection,
    connect,
    create_sqlalchemy_engine,
    execute_statement,
    get_connection_url,
    redact_password,
    wait_for_database,
)
