"""
Database abstraction layer for plug-and-play database support.
Supports Memory (in-memory) database backends.
"""
from .base import DatabaseInterface, DronesCollection, JobsCollection, RecordCollection
from .exceptions import InvalidRecordIdError, UnsupportedDatabaseTypeError
from .memory_adapter import MEMORY_DATABASE_TYPE, MemoryAdapter
from .memory_collections import InMemoryDrones, InMemoryJobs
from .factory import DatabaseFactory

__all__ = [
    "DatabaseInterface",
    "RecordCollection",
    "DronesCollection",
    "JobsCollection",
    "InvalidRecordIdError",
    "UnsupportedDatabaseTypeError",
    "MEMORY_DATABASE_TYPE",
    "MemoryAdapter",
    "InMemoryDrones",
    "InMemoryJobs",
    "DatabaseFactory"
]
