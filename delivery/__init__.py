"""
In-memory persistence backend for the drone-delivery simulation.
"""
from .services.database import DatabaseFactory, DatabaseInterface, MemoryAdapter

__version__ = "0.1.0"

__all__ = ["DatabaseFactory", "DatabaseInterface", "MemoryAdapter", "__version__"]
