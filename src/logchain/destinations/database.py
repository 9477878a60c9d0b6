"""Destinations — DatabaseDestination (SQLAlchemy 2.x Core)."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    insert,
    select,
)


class DatabaseDestination:
    """Inserts each message as a row of the ``log_messages`` table.

    Uses raw Core ``insert`` with a synchronous engine so delivery happens on
    the caller's thread; any DBAPI URL SQLAlchemy accepts will do.  The table
    is created on construction if it does not exist.

    Columns:

    - ``id``: autoincrement primary key (insertion order)
    - ``message``: the formatted line
    - ``created_at``: UTC timestamp of delivery
    """

    TABLE_NAME = "log_messages"

    def __init__(
        self,
        database_url: str,
        table_name: str | None = None,
        **engine_kwargs: Any,
    ) -> None:
        self._engine = create_engine(database_url, **engine_kwargs)
        self._metadata = MetaData()
        self._table = Table(
            table_name or self.TABLE_NAME,
            self._metadata,
            Column("id", Integer, primary_key=True, autoincrement=True),
            Column("message", Text, nullable=False),
            Column("created_at", DateTime(timezone=True), nullable=False, index=True),
        )
        self.create_table()

    @property
    def table(self) -> Table:
        return self._table

    def create_table(self) -> None:
        """Create the log table if it does not exist."""
        self._metadata.create_all(self._engine)

    def deliver(self, formatted_message: str) -> None:
        stmt = insert(self._table).values(
            message=formatted_message,
            created_at=datetime.now(timezone.utc),
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)

    def fetch_all(self, limit: int = 1000) -> list[str]:
        """Return stored messages in insertion order."""
        stmt = select(self._table.c.message).order_by(self._table.c.id).limit(limit)
        with self._engine.connect() as conn:
            return [row.message for row in conn.execute(stmt)]

    def close(self) -> None:
        self._engine.dispose()

    def __repr__(self) -> str:
        return f"DatabaseDestination(url={self._engine.url.render_as_string(hide_password=True)!r})"


__all__ = ["DatabaseDestination"]
