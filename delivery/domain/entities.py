"""
Domain entities - Core business objects.
These represent the simulation's records, not storage models.
The persistence layer only reads their ``id``; every other field is owned
by the simulation logic.
"""
from dataclasses import dataclass, field
from typing import Optional
from .value_objects import DroneId, DroneState, JobId, JobState, Location


@dataclass
class Drone:
    """
    Drone entity - a delivery drone taking part in the simulation.
    """
    id: DroneId
    state: DroneState = DroneState.READY
    location: Location = field(default_factory=lambda: Location(0.0, 0.0))
    job_id: Optional[JobId] = None

    def is_available(self) -> bool:
        """Check if drone can take a new job."""
        return self.state == DroneState.READY and self.job_id is None


@dataclass
class Job:
    """
    Job entity - a package waiting for, or being carried by, a drone.
    """
    id: JobId
    origin: Location
    destination: Location
    state: JobState = JobState.INIT
    drone_id: Optional[DroneId] = None

    def is_assigned(self) -> bool:
        return self.drone_id is not None

    def is_delivered(self) -> bool:
        return self.state == JobState.DELIVERED
