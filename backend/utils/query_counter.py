"""
SQL Statement Counting

Counts the statements every engine sends to the database while a counter is
active in the current context. Used per request to make N+1 loading visible
and in tests to pin down how many round trips a query strategy costs.

Usage:
    with count_queries() as counter:
        repository.find_all_with_item()
    assert counter.count == 1
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import List, Optional

from sqlalchemy import event
from sqlalchemy.engine import Engine


class QueryCounter:
    """Accumulates the statements executed while it is active."""

    def __init__(self):
        self.statements: List[str] = []

    @property
    def count(self) -> int:
        return len(self.statements)

    def record(self, statement: str) -> None:
        self.statements.append(statement)


_active_counter: ContextVar[Optional[QueryCounter]] = ContextVar('active_query_counter', default=None)


@event.listens_for(Engine, "before_cursor_execute")
def _record_statement(conn, cursor, statement, parameters, context, executemany):
    counter = _active_counter.get()
    if counter is not None:
        counter.record(statement)


@contextmanager
def count_queries():
    """
    Activate a fresh QueryCounter for the enclosed block.

    Work started from this context (including threadpool calls that copy the
    context) records into the same counter.

    Yields:
        The active QueryCounter
    """
    counter = QueryCounter()
    token = _active_counter.set(counter)
    try:
        yield counter
    finally:
        _active_counter.reset(token)
