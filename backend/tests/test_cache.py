"""
Tests for the request-scoped read cache.
"""

from worktracker.core.cache import RequestCache, get_request_cache
from worktracker.models.user_settings import UserSettings
from worktracker.services.data_cache import get_current_work_log, get_user_settings

from conftest import FakeClock


def _counting_loader(values):
    calls = []

    def load():
        calls.append(1)
        return values[len(calls) - 1]

    return load, calls


def test_second_lookup_within_ttl_does_not_reload(clock):
    cache = RequestCache(ttl_ms=5000, clock=clock)
    load, calls = _counting_loader(["first", "second"])

    assert cache.get_or_load("settings:u1", load) == "first"
    clock.advance(4999)
    assert cache.get_or_load("settings:u1", load) == "first"
    assert len(calls) == 1


def test_lookup_at_ttl_reloads_and_supersedes_entry(clock):
    cache = RequestCache(ttl_ms=5000, clock=clock)
    load, calls = _counting_loader(["first", "second"])

    cache.get_or_load("tasks:7", load)
    clock.advance(5000)
    assert cache.get_or_load("tasks:7", load) == "second"
    assert len(calls) == 2
    assert len(cache) == 1

    # The reload restarted the window.
    clock.advance(4000)
    assert cache.get_or_load("tasks:7", load) == "second"
    assert len(calls) == 2


def test_none_is_a_cacheable_value(clock):
    cache = RequestCache(ttl_ms=5000, clock=clock)
    load, calls = _counting_loader([None, "late"])

    assert cache.get_or_load("current-log:u1", load) is None
    assert cache.get_or_load("current-log:u1", load) is None
    assert "current-log:u1" in cache
    assert len(calls) == 1


def test_keys_are_independent(clock):
    cache = RequestCache(ttl_ms=5000, clock=clock)
    cache.set("settings:a", 1)
    cache.set("settings:b", 2)

    assert cache.get("settings:a") == 1
    assert cache.get("settings:b") == 2
    assert cache.get("settings:c") is None


def test_request_dependency_builds_fresh_cache_each_time():
    first_gen = get_request_cache()
    second_gen = get_request_cache()
    first = next(first_gen)
    second = next(second_gen)

    first.set("settings:u1", "value")
    assert first is not second
    assert second.get("settings:u1") is None


def test_user_settings_stale_until_ttl_lapses(db_session):
    clock = FakeClock()
    cache = RequestCache(ttl_ms=5000, clock=clock)
    db_session.add(UserSettings(user_id="u1", currency="EUR", hourly_rate=20))
    db_session.commit()

    assert get_user_settings(db_session, cache, "u1").hourly_rate == 20

    row = db_session.query(UserSettings).filter(UserSettings.user_id == "u1").first()
    row.hourly_rate = 35
    db_session.commit()

    clock.advance(1000)
    assert get_user_settings(db_session, cache, "u1").hourly_rate == 20

    clock.advance(4000)
    assert get_user_settings(db_session, cache, "u1").hourly_rate == 35


def test_user_settings_defaults_without_row(db_session):
    result = get_user_settings(db_session, RequestCache(), "nobody")

    assert result.currency == "GBP"
    assert result.hourly_rate == 10


def test_current_work_log_is_idle_for_new_user(db_session):
    assert get_current_work_log(db_session, RequestCache(), "nobody") is None


def test_tasks_for_log_are_scoped_to_owner(db_session):
    from datetime import datetime, timezone

    from worktracker.models.task import Task
    from worktracker.models.work_log import WorkLog
    from worktracker.services.data_cache import get_tasks_for_log

    log = WorkLog(user_id="u1", start_time=datetime(2026, 3, 2, 9, tzinfo=timezone.utc), total_seconds=0)
    db_session.add(log)
    db_session.commit()
    db_session.add_all([
        Task(work_log_id=log.id, user_id="u1", description="mine", duration=5),
        Task(work_log_id=log.id, user_id="u2", description="stray", duration=5),
    ])
    db_session.commit()

    tasks = get_tasks_for_log(db_session, RequestCache(), "u1", log.id)
    assert [task.description for task in tasks] == ["mine"]
    assert get_tasks_for_log(db_session, RequestCache(), "u2", log.id)[0].description == "stray"
