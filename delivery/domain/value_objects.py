"""
Value Objects - Immutable objects that represent domain concepts.
These have no identity and are compared by value.
"""
from dataclasses import dataclass
from enum import Enum
from typing import NewType

# Identifiers are plain strings; NewType keeps drone and job keys apart for type checkers
DroneId = NewType("DroneId", str)
JobId = NewType("JobId", str)


@dataclass(frozen=True)
class Location:
    """A point on the simulation map."""
    x: float
    y: float

    def distance_to(self, other: "Location") -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5


class DroneState(str, Enum):
    READY = "ready"
    EN_ROUTE = "en_route"
    DELIVERING = "delivering"
    RETURNING = "returning"
    OFFLINE = "offline"


class JobState(str, Enum):
    INIT = "init"
    WAITING = "waiting"
    ON_DRONE = "on_drone"
    DELIVERED = "delivered"
