"""
Abstract base classes for database backends and the collections they own.
All backend implementations must inherit from DatabaseInterface.
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

from .exceptions import InvalidRecordIdError
from ...domain.entities import Drone, Job
from ...domain.value_objects import DroneId, JobId
from ...models.stats import DatabaseStats
from ...core.logging_config import get_logger

logger = get_logger(__name__)

RecordT = TypeVar("RecordT")


def require_record_id(record_id: Any) -> str:
    """Return record_id if it is a usable key, otherwise raise InvalidRecordIdError."""
    if record_id is None:
        raise InvalidRecordIdError("Record identifier must not be None")
    if not isinstance(record_id, str):
        raise InvalidRecordIdError(
            f"Record identifier must be a string, got {type(record_id).__name__}"
        )
    if not record_id.strip():
        raise InvalidRecordIdError("Record identifier must not be blank")
    return record_id


class RecordCollection(ABC, Generic[RecordT]):
    """
    Abstract interface for a collection of records keyed by their ``id``.
    Records are opaque to the collection apart from that attribute.
    """

    @abstractmethod
    def insert(self, record: RecordT) -> None:
        """Add the record, replacing any record stored under the same id."""
        pass

    @abstractmethod
    def lookup(self, record_id: str) -> Optional[RecordT]:
        """Get a record by id, or None when no such record exists."""
        pass

    @abstractmethod
    def enumerate(self) -> List[RecordT]:
        """Get a snapshot of all current records."""
        pass

    @abstractmethod
    def remove(self, record_id: str) -> bool:
        """Remove a record. Returns False when nothing was stored under the id."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of records currently stored."""
        pass

    @abstractmethod
    def clear(self) -> int:
        """Remove all records and return how many were removed."""
        pass

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, record_id: object) -> bool:
        if not isinstance(record_id, str) or not record_id.strip():
            return False
        return self.lookup(record_id) is not None


class DronesCollection(RecordCollection[Drone]):
    """Drone records keyed by drone id."""

    @abstractmethod
    def lookup(self, record_id: DroneId) -> Optional[Drone]:
        pass


class JobsCollection(RecordCollection[Job]):
    """Delivery job records keyed by job id."""

    @abstractmethod
    def lookup(self, record_id: JobId) -> Optional[Job]:
        pass

    @abstractmethod
    def get_by_drone(self, drone_id: DroneId) -> List[Job]:
        """Get jobs whose drone_id refers to the given drone."""
        pass


class DatabaseInterface(ABC):
    """
    Abstract interface for database backends.
    A backend owns exactly one drones collection and one jobs collection for
    its whole lifetime; clear() empties them in place and never replaces them.
    This allows plug-and-play backends without changing simulation logic.
    """

    @property
    @abstractmethod
    def drones(self) -> DronesCollection:
        """The drones collection owned by this backend."""
        pass

    @property
    @abstractmethod
    def jobs(self) -> JobsCollection:
        """The jobs collection owned by this backend."""
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        """
        Whether the backend is usable right now.
        Callers should check this before relying on collection state for
        backends that can lose their connection.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """
        Empty both collections.
        Jobs hold drone ids, so jobs are cleared before drones.
        """
        pass

    @abstractmethod
    def database_type(self) -> str:
        """Human-readable backend name, for diagnostics and logging only."""
        pass

    def get_stats(self) -> DatabaseStats:
        """Get a snapshot of the backend state (useful for debugging)."""
        connected = self.is_connected()
        return DatabaseStats(
            database_type=self.database_type(),
            connected=connected,
            drone_count=self.drones.count() if connected else 0,
            job_count=self.jobs.count() if connected else 0
        )
