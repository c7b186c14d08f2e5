from pydantic import BaseModel


class DatabaseStats(BaseModel):
    """Point-in-time view of a database backend, for diagnostics and logging."""
    database_type: str
    connected: bool
    drone_count: int = 0
    job_count: int = 0
