"""Shared fixtures: an in-memory stand-in for a PyMySQL connection."""

from __future__ import annotations

from typing import Any

import pymysql
import pytest


class FakeCursor:
    """Test double recording executed queries and close calls."""

    def __init__(
        self,
        rows: list[tuple],
        fail_on_execute=None,
        fail_after=None,
        execute_errors=None,
    ):
        self.rows = rows
        self.fail_on_execute = fail_on_execute
        # Raised one per execute() call, in order; None lets that call succeed.
        self.execute_errors = list(execute_errors or [])
        self.fail_after = fail_after
        self.executed: list[tuple[str, Any]] = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False

    def close(self):
        self.closed = True

    def execute(self, query, args=None):
        self.executed.append((query, args))
        if self.execute_errors:
            error = self.execute_errors.pop(0)
            if error is not None:
                raise error
        if self.fail_on_execute is not None:
            raise self.fail_on_execute
        return len(self.rows)

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def __iter__(self):
        for index, row in enumerate(self.rows):
            if self.fail_after is not None and index >= self.fail_after:
                raise pymysql.err.OperationalError(2013, "Lost connection during query")
            yield row


class FakeConnection:
    """Test double for ``pymysql.Connection``."""

    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.open = True
        self.close_calls = 0

    def cursor(self):
        return self._cursor

    def close(self):
        self.close_calls += 1
        self.open = False


class FakeMySQL:
    """Replaces ``pymysql.connect`` and remembers what it was called with."""

    def __init__(self):
        self.rows: list[tuple] = []
        self.fail_on_execute = None
        self.fail_after = None
        self.execute_errors: list = []
        self.connect_error = None
        self.connect_kwargs: dict[str, Any] | None = None
        self.connection: FakeConnection | None = None

    def connect(self, **kwargs):
        self.connect_kwargs = kwargs
        if self.connect_error is not None:
            raise self.connect_error
        cursor = FakeCursor(
            self.rows,
            fail_on_execute=self.fail_on_execute,
            fail_after=self.fail_after,
            execute_errors=self.execute_errors,
        )
        self.connection = FakeConnection(cursor)
        return self.connection

    @property
    def cursor(self) -> FakeCursor:
        assert self.connection is not None
        return self.connection._cursor


@pytest.fixture()
def fake_mysql(monkeypatch) -> FakeMySQL:
    fake = FakeMySQL()
    monkeypatch.setattr(pymysql, "connect", fake.connect)
    return fake


@pytest.fixture()
def users_rows() -> list[tuple]:
    """Catalog rows as INFORMATION_SCHEMA.COLUMNS returns them for a users table."""
    return [
        ("id", "int(11)", "PRI", "auto_increment", "int", "NO", None, "primary id"),
        ("email", "varchar(255)", "UNI", "", "varchar", "YES", None, ""),
        ("balance", "decimal(10,2)", "", "", "decimal", "NO", b"0.00", "account balance"),
        ("created_at", "datetime", "", "", "datetime", "NO", "CURRENT_TIMESTAMP", ""),
    ]
