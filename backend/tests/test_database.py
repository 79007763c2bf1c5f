"""
Tests for the request-scoped database session dependency.
"""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from worktracker.database import session as session_module


class RecordingSession:
    def __init__(self):
        self.calls = []

    def rollback(self):
        self.calls.append("rollback")

    def close(self):
        self.calls.append("close")


def test_get_db_rolls_back_when_request_fails(monkeypatch):
    recorder = RecordingSession()
    monkeypatch.setattr(session_module, "SessionLocal", lambda: recorder)

    dependency = session_module.get_db()
    assert next(dependency) is recorder
    with pytest.raises(SQLAlchemyError):
        dependency.throw(SQLAlchemyError("constraint failed"))

    assert recorder.calls == ["rollback", "close"]


def test_get_db_only_closes_on_success(monkeypatch):
    recorder = RecordingSession()
    monkeypatch.setattr(session_module, "SessionLocal", lambda: recorder)

    dependency = session_module.get_db()
    next(dependency)
    with pytest.raises(StopIteration):
        next(dependency)

    assert recorder.calls == ["close"]
