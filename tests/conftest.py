import pytest

from delivery.domain import Drone, Job, Location
from delivery.services.database import MemoryAdapter


@pytest.fixture
def db():
    return MemoryAdapter()


@pytest.fixture
def drone():
    return Drone(id="D1", location=Location(1.0, 2.0))


@pytest.fixture
def job():
    return Job(id="J1", origin=Location(0.0, 0.0), destination=Location(3.0, 4.0), drone_id="D1")
