"""Helpers for resolving use cases with a scoped database session."""

from collections.abc import Generator
from contextlib import contextmanager
from typing import TypeVar

from dependency_injector.providers import Provider

from lodging.core import container
from lodging.database import get_session_factory

T = TypeVar("T")


@contextmanager
def use_case_scope(provider: Provider[T]) -> Generator[T, None, None]:
    """
    Build a use case from a container provider on a fresh session.

    Overrides container.db for the duration of the block and closes the
    session afterwards.

    Example:
        with use_case_scope(container.room_queries_use_case) as queries:
            room = queries.get_room(room_id)
    """
    db = get_session_factory()()
    try:
        container.db.override(db)
        yield provider()
    finally:
        # Reset override after the scope completes
        container.db.reset_override()
        db.close()
