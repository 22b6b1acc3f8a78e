"""
Column-level writes for repository saves.

Repositories record the column values of every aggregate they read or write,
keyed by table and primary key, in the session's ``info`` dict. A save then
compares the mapper's output with that record and applies only the columns
that differ, so an edit made on an earlier read leaves columns that other
transactions committed in the meantime untouched. Rows without a record are
written in full.

Example:
    tracker = RowTracker(session)
    room = mapper.to_domain(orm_model)
    tracker.remember(mapper.to_orm(room))
    ...
    tracker.save(mapper.to_orm(room))
"""

from typing import Any

import structlog
from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from lodging.database import Base

logger = structlog.get_logger(__name__)

_INFO_KEY = "lodging.row_snapshots"

RowKey = tuple[str, tuple[Any, ...]]
RowValues = dict[str, Any]


@event.listens_for(Session, "after_rollback")
def _discard_snapshots(session: Session) -> None:
    # Values recorded by saves in the rolled back transaction never reached the database
    session.info.pop(_INFO_KEY, None)


def column_values(row: Base) -> RowValues:
    """Column attributes set on an ORM instance, keyed by attribute name."""
    state = inspect(row)
    return {
        prop.key: state.dict[prop.key]
        for prop in state.mapper.column_attrs
        if prop.key in state.dict
    }


def _row_key(row: Base) -> RowKey:
    mapper = inspect(row).mapper
    return mapper.local_table.name, tuple(mapper.primary_key_from_instance(row))


class RowTracker:
    """Per-session record of the column values each row was read or written with."""

    def __init__(self, session: Session) -> None:
        self.session = session

    @property
    def _snapshots(self) -> dict[RowKey, RowValues]:
        return self.session.info.setdefault(_INFO_KEY, {})

    def remember(self, row: Base) -> None:
        """Record `row` (a transient instance built by a mapper) as the stored state."""
        self._snapshots[_row_key(row)] = column_values(row)

    def is_known(self, row: Base) -> bool:
        return _row_key(row) in self._snapshots

    def save(self, row: Base) -> None:
        """
        Insert `row`, or apply the columns that changed since it was remembered.

        `row` is a transient instance built by a mapper; it is added to the
        session only when no stored row exists.
        """
        key = _row_key(row)
        values = column_values(row)
        snapshot = self._snapshots.get(key)
        if snapshot is None:
            changes = values
        else:
            changes = {name: value for name, value in values.items() if snapshot.get(name) != value}
            if not changes:
                return

        existing = self.session.get(type(row), key[1])
        if existing is None:
            self.session.add(row)
        else:
            for name, value in changes.items():
                setattr(existing, name, value)
            logger.debug("row_columns_written", table=key[0], columns=sorted(changes))
        self._snapshots[key] = values

    def insert_if_new(self, row: Base) -> None:
        """Insert `row` unless it was remembered or already exists; never update."""
        if self.is_known(row):
            return
        if self.session.get(type(row), _row_key(row)[1]) is None:
            self.session.add(row)
            self.remember(row)
