from __future__ import annotations

from http import HTTPStatus

import pytest
from flask import Flask
from sqlalchemy.exc import IntegrityError, OperationalError

from courseeval.infrastructure.unit_of_work import unit_of_work_scope
from courseeval.shared.errors.base import InfrastructureError
from courseeval.shared.middleware.error_handler import configure_error_handling


class RecordingSession:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def commit(self) -> None:
        self.calls.append("commit")

    def rollback(self) -> None:
        self.calls.append("rollback")

    def close(self) -> None:
        self.calls.append("close")


def test_scope_commits_and_closes_on_success() -> None:
    session = RecordingSession()

    with unit_of_work_scope(lambda: session) as yielded:
        assert yielded is session

    assert session.calls == ["commit", "close"]


def test_integrity_error_is_rolled_back_and_propagated() -> None:
    session = RecordingSession()

    with pytest.raises(IntegrityError):
        with unit_of_work_scope(lambda: session):
            raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

    assert session.calls == ["rollback", "close"]


def test_database_failure_becomes_infrastructure_error() -> None:
    session = RecordingSession()

    with pytest.raises(InfrastructureError) as exc_info:
        with unit_of_work_scope(lambda: session):
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    assert exc_info.value.code == "database_error"
    assert exc_info.value.status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert isinstance(exc_info.value.__cause__, OperationalError)
    assert session.calls == ["rollback", "close"]


def test_domain_errors_pass_through_after_rollback() -> None:
    session = RecordingSession()

    with pytest.raises(LookupError):
        with unit_of_work_scope(lambda: session):
            raise LookupError("missing")

    assert session.calls == ["rollback", "close"]


def test_database_failure_renders_500_envelope() -> None:
    app = Flask(__name__)
    configure_error_handling(app)

    @app.get("/boom")
    def boom():
        with unit_of_work_scope(RecordingSession):
            raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    response = app.test_client().get("/boom")

    assert response.status_code == 500
    body = response.get_json()
    assert body["code"] == 500
    assert body["data"] is None
    assert body["error"] == "database_error"
    assert "disk I/O error" not in response.get_data(as_text=True)
