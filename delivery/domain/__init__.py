"""
Domain layer - Contains the drone and job records stored by the database.
This layer is independent of any storage backend.
"""
from .entities import Drone, Job
from .value_objects import DroneId, DroneState, JobId, JobState, Location

__all__ = [
    "Drone",
    "Job",
    "DroneId",
    "DroneState",
    "JobId",
    "JobState",
    "Location"
]
