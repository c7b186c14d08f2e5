import logging

from delivery.domain import Drone, Job, Location
from delivery.models.stats import DatabaseStats
from delivery.services.database import (
    DatabaseInterface,
    InMemoryDrones,
    InMemoryJobs,
    MEMORY_DATABASE_TYPE,
    MemoryAdapter,
)


def test_is_connected_after_construction(db):
    assert db.is_connected() is True


def test_implements_database_interface(db):
    assert isinstance(db, DatabaseInterface)
    assert isinstance(db.drones, InMemoryDrones)
    assert isinstance(db.jobs, InMemoryJobs)


def test_starts_empty(db):
    assert db.drones.enumerate() == []
    assert db.jobs.enumerate() == []


def test_database_type_is_stable(db):
    first = db.database_type()
    assert first
    assert first == MEMORY_DATABASE_TYPE
    assert db.database_type() == first
    assert MemoryAdapter().database_type() == first


def test_instances_do_not_share_collections():
    a = MemoryAdapter()
    b = MemoryAdapter()
    a.drones.insert(Drone(id="D1"))
    assert b.drones.lookup("D1") is None
    assert a.drones is not b.drones


def test_clear_keeps_same_collection_instances(db, drone, job):
    drones, jobs = db.drones, db.jobs
    db.drones.insert(drone)
    db.jobs.insert(job)

    db.clear()

    assert db.drones is drones
    assert db.jobs is jobs


def test_clear_empties_both_collections(db, drone, job):
    db.drones.insert(drone)
    db.jobs.insert(job)

    db.clear()

    assert db.drones.enumerate() == []
    assert db.jobs.enumerate() == []


def test_clear_twice_is_noop(db, drone, job):
    db.drones.insert(drone)
    db.jobs.insert(job)

    db.clear()
    db.clear()

    assert db.drones.enumerate() == []
    assert db.jobs.enumerate() == []


def test_clear_empties_jobs_before_drones(db, monkeypatch):
    calls = []
    monkeypatch.setattr(db.jobs, "clear", lambda: calls.append("jobs") or 0)
    monkeypatch.setattr(db.drones, "clear", lambda: calls.append("drones") or 0)

    db.clear()

    assert calls == ["jobs", "drones"]


def test_clear_logs_removed_counts(db, drone, job, caplog):
    db.drones.insert(drone)
    db.jobs.insert(job)

    with caplog.at_level(logging.INFO, logger="delivery"):
        db.clear()

    assert "1 jobs, 1 drones removed" in caplog.text


def test_delivery_scenario(db):
    db.drones.insert(Drone(id="D1"))
    db.jobs.insert(Job(id="J1", origin=Location(0, 0), destination=Location(5, 5), drone_id="D1"))

    drones = db.drones.enumerate()
    assert len(drones) == 1
    assert drones[0].id == "D1"
    assert db.jobs.get_by_drone("D1")[0].id == "J1"

    db.clear()

    assert db.drones.enumerate() == []
    assert db.jobs.enumerate() == []
    assert db.database_type() == MEMORY_DATABASE_TYPE


def test_get_stats(db, drone, job):
    db.drones.insert(drone)
    db.drones.insert(Drone(id="D2"))
    db.jobs.insert(job)

    stats = db.get_stats()

    assert stats == DatabaseStats(
        database_type=MEMORY_DATABASE_TYPE,
        connected=True,
        drone_count=2,
        job_count=1,
    )


def test_get_stats_for_disconnected_backend():
    class OfflineDatabase(MemoryAdapter):
        def is_connected(self):
            return False

        def database_type(self):
            return "Offline"

    stats = OfflineDatabase().get_stats()

    assert stats.connected is False
    assert stats.drone_count == 0
    assert stats.job_count == 0
