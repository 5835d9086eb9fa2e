"""
Database plumbing shared by the SQL adapters.

Builds the SQLAlchemy engine from settings and scopes units of work
in explicit transactions. A transaction binds its connection to a
context variable so every repository call made inside the block
shares it. Outside a block each repository call runs in its own
short transaction.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.pool import StaticPool

from workshop.domain.people.ports import TransactionManager


def build_engine(database_url: str) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    SQLite connections are shared across the request threadpool, and an
    in-memory SQLite database is pinned to a single connection so that
    every session sees the same data.
    """
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


class SqlTransactionManager(TransactionManager):
    """Runs a unit of work inside one `engine.begin()` block."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._current: ContextVar[Optional[Connection]] = ContextVar(
            f"workshop_tx_{id(self)}", default=None
        )

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Open a transaction, or join the one already open in this context."""
        current = self._current.get()
        if current is not None:
            yield current
            return
        with self._engine.begin() as conn:
            token = self._current.set(conn)
            try:
                yield conn
            finally:
                self._current.reset(token)

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        """Yield the bound connection, or a fresh one in its own transaction."""
        current = self._current.get()
        if current is not None:
            yield current
            return
        with self._engine.begin() as conn:
            yield conn
