"""
Database Factory for creating database backends.
Implements Factory Pattern for plug-and-play database support.
"""
from typing import List, Optional

from .base import DatabaseInterface
from .exceptions import UnsupportedDatabaseTypeError
from .memory_adapter import MemoryAdapter
from ...core import config
from ...core.logging_config import get_logger

logger = get_logger(__name__)

SUPPORTED_DATABASE_TYPES = ("memory",)


class DatabaseFactory:
    """
    Factory for creating database backends.
    Supports Memory (in-memory) backends.
    """

    @staticmethod
    def create(database_type: Optional[str] = None, **kwargs) -> DatabaseInterface:
        """
        Create a database backend instance.

        Args:
            database_type: Type of database ('memory', or None to use DATABASE_TYPE)
            **kwargs: Additional arguments for specific backends

        Returns:
            DatabaseInterface instance

        Examples:
            # Memory (in-memory, non-persistent)
            db = DatabaseFactory.create('memory')

            # From the DATABASE_TYPE setting
            db = DatabaseFactory.create()
        """
        if database_type is None:
            database_type = config.DATABASE_TYPE

        database_type = database_type.strip().lower()

        if database_type == "memory":
            db = DatabaseFactory._create_memory(**kwargs)
        else:
            raise UnsupportedDatabaseTypeError(
                f"Unsupported database type: {database_type}. "
                f"Supported types: {', '.join(repr(t) for t in SUPPORTED_DATABASE_TYPES)}"
            )

        logger.info(f"Using {db.database_type()} database (type '{database_type}')")
        return db

    @staticmethod
    def supported_types() -> List[str]:
        return list(SUPPORTED_DATABASE_TYPES)

    @staticmethod
    def _create_memory(**kwargs) -> MemoryAdapter:
        """Create in-memory adapter (for simulation runs and testing)."""
        return MemoryAdapter()
