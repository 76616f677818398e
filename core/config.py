"""
=============================================
Configuration management for the query builder.
=============================================

Loads connection settings from environment variables (.env file) and provides
a centralized Config singleton for application-wide access.

The configuration system ensures:
- Single source of truth for connection settings
- Type conversion of numeric settings
- Driver selection through a SQLAlchemy drivername

Example:
    >>> from core.config import config
    >>> 
    >>> # Keyword arguments for Database(...)
    >>> params = config.get_connection_params()
    >>> 
    >>> # Access individual settings
    >>> print(f"Host: {config.db_host}, Port: {config.db_port}")
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


@dataclass
class DatabaseConfig:
    """Database configuration settings.
    
    Attributes:
        drivername: SQLAlchemy drivername (e.g. 'mysql+pymysql', 'postgresql')
        host: Database server hostname or IP address
        port: Database server port number
        user: Database username
        password: Database password
        database: Database name to connect to
        connect_timeout: Connection timeout in seconds
    """
    
    drivername: str
    host: str
    port: int
    user: str
    password: str
    database: str
    connect_timeout: int = 10
    
    def get_connection_params(self) -> dict:
        """Get connection parameters as dictionary.
        
        Returns:
            Dictionary with keys: host, port, user, password, database, drivername
        """
        return {
            'host': self.host,
            'port': self.port,
            'user': self.user,
            'password': self.password,
            'database': self.database,
            'drivername': self.drivername
        }


class Config:
    """Centralized configuration manager.
    
    Attributes:
        db: DatabaseConfig instance with database connection settings
        log_level: Default logging level name
    
    Example:
        >>> config = Config()
        >>> print(f"Connecting to {config.db_host}:{config.db_port}")
    """
    
    def __init__(self):
        """Initialize configuration from environment variables."""
        self.db = DatabaseConfig(
            drivername=os.getenv('DB_DRIVER', 'mysql+pymysql'),
            host=os.getenv('DB_HOST', 'localhost'),
            port=int(os.getenv('DB_PORT', '3306')),
            user=os.getenv('DB_USER', 'root'),
            password=os.getenv('DB_PASSWORD', ''),
            database=os.getenv('DB_NAME', 'test'),
            connect_timeout=int(os.getenv('DB_CONNECT_TIMEOUT', '10'))
        )
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
    
    @property
    def db_driver(self) -> str:
        """Get SQLAlchemy drivername."""
        return self.db.drivername
    
    @property
    def db_host(self) -> str:
        """Get database server hostname."""
        return self.db.host
    
    @property
    def db_port(self) -> int:
        """Get database server port number."""
        return self.db.port
    
    @property
    def db_user(self) -> str:
        """Get database username."""
        return self.db.user
    
    @property
    def db_password(self) -> str:
        """Get database password."""
        return self.db.password
    
    @property
    def db_name(self) -> str:
        """Get database name."""
        return self.db.database
    
    @property
    def db_connect_timeout(self) -> int:
        return self.db.connect_timeout
    
    def get_connection_params(self) -> dict:
        """Get database connection parameters.
        
        Returns:
            Dictionary with keys: host, port, user, password, database, drivername
            
        Example:
            >>> params = Config().get_connection_params()
            >>> db = Database(**params)
        """
        return self.db.get_connection_params()


# Global configuration instance
config = Config()
