"""
In-memory drone and job collections backed by Python dicts.
Each collection guards its dict with its own lock, so one collection can be
read, written and cleared from several threads without higher-level locking.
"""
from threading import Lock
from typing import Dict, List, Optional

from .base import DronesCollection, JobsCollection, RecordT, require_record_id
from .exceptions import InvalidRecordIdError
from ...domain.entities import Drone, Job
from ...domain.value_objects import DroneId, JobId
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class _InMemoryRecords:
    """
    Dict storage shared by the in-memory collections.
    Records are stored by reference: the simulation keeps mutating the same
    objects it inserted.
    """

    def __init__(self, kind: str):
        self._kind = kind
        self._records: Dict[str, RecordT] = {}
        self._lock = Lock()

    def insert(self, record: RecordT) -> None:
        if record is None:
            raise InvalidRecordIdError(f"Cannot insert None into {self._kind}")
        record_id = require_record_id(getattr(record, "id", None))
        with self._lock:
            replaced = record_id in self._records
            self._records[record_id] = record
        if replaced:
            logger.debug(f"Replaced {self._kind} record {record_id}")

    def lookup(self, record_id: str) -> Optional[RecordT]:
        require_record_id(record_id)
        with self._lock:
            return self._records.get(record_id)

    def enumerate(self) -> List[RecordT]:
        with self._lock:
            return list(self._records.values())

    def remove(self, record_id: str) -> bool:
        require_record_id(record_id)
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> int:
        with self._lock:
            removed = len(self._records)
            self._records.clear()
        return removed


class InMemoryDrones(_InMemoryRecords, DronesCollection):
    """Drones collection held entirely in process memory."""

    def __init__(self):
        super().__init__("drones")

    def lookup(self, record_id: DroneId) -> Optional[Drone]:
        return super().lookup(record_id)


class InMemoryJobs(_InMemoryRecords, JobsCollection):
    """Jobs collection held entirely in process memory."""

    def __init__(self):
        super().__init__("jobs")

    def lookup(self, record_id: JobId) -> Optional[Job]:
        return super().lookup(record_id)

    def get_by_drone(self, drone_id: DroneId) -> List[Job]:
        require_record_id(drone_id)
        with self._lock:
            return [job for job in self._records.values() if getattr(job, "drone_id", None) == drone_id]
