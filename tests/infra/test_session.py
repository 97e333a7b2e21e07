"""Unit tests for engine/session lifecycle, with SQLAlchemy factories patched out."""

from __future__ import annotations

import logging
from typing import Iterator
from unittest.mock import Mock, patch

import pytest

from fleet_tracker.domain.errors import NotFoundError
from fleet_tracker.infra.db import session as db_session


@pytest.fixture(autouse=True)
def reset_engine() -> Iterator[None]:
    db_session.dispose_engine()
    yield
    db_session.dispose_engine()


@pytest.fixture
def session_factory() -> Iterator[Mock]:
    """Patch sessionmaker so get_session() hands out a Mock session."""
    factory = Mock()
    with (
        patch.object(db_session, "create_engine") as create_engine,
        patch.object(db_session, "sessionmaker", return_value=factory),
    ):
        create_engine.return_value = Mock()
        yield factory


def test_engine_is_created_lazily_once(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://fleet@localhost/fleet")
    monkeypatch.setenv("DB_POOL_SIZE", "4")

    with patch.object(db_session, "create_engine") as create_engine:
        first = db_session.get_engine()
        second = db_session.get_engine()

    assert first is second
    create_engine.assert_called_once()
    args, kwargs = create_engine.call_args
    assert args == ("postgresql+psycopg://fleet@localhost/fleet",)
    assert kwargs["pool_size"] == 4
    assert kwargs["pool_pre_ping"] is True


def test_dispose_engine_closes_pool(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://fleet@localhost/fleet")

    with patch.object(db_session, "create_engine") as create_engine:
        engine = db_session.get_engine()
        db_session.dispose_engine()
        db_session.get_engine()

    engine.dispose.assert_called_once()
    assert create_engine.call_count == 2


def test_get_session_commits_on_success(
    monkeypatch: pytest.MonkeyPatch, session_factory: Mock
) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://fleet@localhost/fleet")
    session = session_factory.return_value

    with db_session.get_session() as yielded:
        assert yielded is session

    session.commit.assert_called_once()
    session.rollback.assert_not_called()
    session.close.assert_called_once()


def test_get_session_rolls_back_on_error(
    monkeypatch: pytest.MonkeyPatch, session_factory: Mock
) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://fleet@localhost/fleet")
    session = session_factory.return_value

    with pytest.raises(RuntimeError):
        with db_session.get_session():
            raise RuntimeError("write failed")

    session.commit.assert_not_called()
    session.rollback.assert_called_once()
    session.close.assert_called_once()


def test_get_session_logs_unexpected_rollback(
    monkeypatch: pytest.MonkeyPatch, session_factory: Mock, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://fleet@localhost/fleet")

    with caplog.at_level(logging.WARNING, logger=db_session.__name__):
        with pytest.raises(RuntimeError):
            with db_session.get_session():
                raise RuntimeError("write failed")

    assert [record.message for record in caplog.records] == ["Rolling back database session"]


def test_get_session_rolls_back_domain_errors_quietly(
    monkeypatch: pytest.MonkeyPatch, session_factory: Mock, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://fleet@localhost/fleet")
    session = session_factory.return_value

    with caplog.at_level(logging.WARNING, logger=db_session.__name__):
        with pytest.raises(NotFoundError):
            with db_session.get_session():
                raise NotFoundError("Car", "404")

    session.rollback.assert_called_once()
    assert caplog.records == []
