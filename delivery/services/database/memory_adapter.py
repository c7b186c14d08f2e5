"""
In-memory adapter implementing DatabaseInterface.
Perfect for simulation runs and testing - stores all records in Python dicts.
Data is lost when the process exits.
"""
from .base import DatabaseInterface
from .memory_collections import InMemoryDrones, InMemoryJobs
from ...core.logging_config import get_logger

logger = get_logger(__name__)

MEMORY_DATABASE_TYPE = "Python Collections"


class MemoryAdapter(DatabaseInterface):
    """
    In-memory database adapter.
    Owns one drones collection and one jobs collection, created empty on
    construction. Has nothing external to connect to, so it is always
    connected and none of its operations can fail.
    """

    def __init__(self):
        self._drones = InMemoryDrones()
        self._jobs = InMemoryJobs()
        logger.debug(f"Created {MEMORY_DATABASE_TYPE} database")

    @property
    def drones(self) -> InMemoryDrones:
        return self._drones

    @property
    def jobs(self) -> InMemoryJobs:
        return self._jobs

    def is_connected(self) -> bool:
        return True

    def clear(self) -> None:
        """Empty jobs, then drones."""
        jobs_removed = self._jobs.clear()
        drones_removed = self._drones.clear()
        logger.info(
            f"Cleared {MEMORY_DATABASE_TYPE} database: "
            f"{jobs_removed} jobs, {drones_removed} drones removed"
        )

    def database_type(self) -> str:
        return MEMORY_DATABASE_TYPE
