"""Database handle, schema scripts and table references."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Union

DATABASE_URL_KEY = "DATABASE_URL"

Params = Union[Sequence[Any], Mapping[str, Any]]


class DatabaseError(Exception):
    """The database could not be reached or configured."""


class DatabaseConfigError(DatabaseError):
    """The database connection is not configured."""


class NoRowsError(DatabaseError):
    """A query expected to return a row returned none."""


class Pool(ABC):
    """A pool of database connections that runs statements."""

    @abstractmethod
    def execute(self, sql: str, params: Params = ()) -> None:
        """Run a statement that returns no rows."""

    @abstractmethod
    def query(self, sql: str, params: Params = ()) -> list[Sequence[Any]]:
        """Run a query and return all its rows."""

    @abstractmethod
    def query_row(self, sql: str, params: Params = ()) -> Sequence[Any]:
        """Run a query and return its first row; raise NoRowsError if none."""


@dataclass
class RelationEntity:
    """A row in a related table, pointing at its owner by a column."""

    table_name: str
    relation_id: int
    column_name: str


@dataclass
class TableEntity:
    """A row identified by its table and id."""

    name: str
    id: int

    def relation_entity(self, relation_name: str) -> RelationEntity:
        """Reference ``relation_name`` rows owned by this row via ``<name>_id``."""
        return self.relation_entity_with_column_name(relation_name, f"{self.name}_id")

    def relation_entity_with_column_name(
        self, relation_name: str, column_name: str
    ) -> RelationEntity:
        """Reference ``relation_name`` rows owned by this row via ``column_name``."""
        return RelationEntity(
            table_name=relation_name, relation_id=self.id, column_name=column_name
        )


def _split_statements(script: str) -> list[str]:
    return script.split(";")


@dataclass
class PgDb:
    """A database reached through a connection pool."""

    pool: Pool

    def execute_sqls(self, sqls: Iterable[str]) -> None:
        """Run each statement in order, skipping blank ones; stop at the first failure."""
        for sql in sqls:
            if sql.strip():
                self.execute_sql(sql)

    def execute_sql(self, sql: str) -> None:
        """Run a single statement."""
        self.pool.execute(sql)

    def execute_file(self, root: Any, path: str) -> None:
        """Run the ``;``-separated statements of ``path`` under ``root``."""
        script = (root / path).read_text(encoding="utf-8")
        self.execute_sqls(_split_statements(script))

    def table_entity(self, name: str, id: int) -> TableEntity:
        """Reference row ``id`` of table ``name``."""
        return TableEntity(name=name, id=id)


def new_pg(connect: Callable[[str], Pool]) -> PgDb:
    """Connect to the database named by the DATABASE_URL environment variable."""
    database_url = os.environ.get(DATABASE_URL_KEY, "")
    if not database_url:
        raise DatabaseConfigError(
            "Database url is not configured, please provide environment "
            f"variable: {DATABASE_URL_KEY}"
        )
    try:
        pool = connect(database_url)
    except Exception as exc:
        raise DatabaseError(f"Unable to create database connection pool: {exc}") from exc
    try:
        pool.query_row("select version()")
    except Exception as exc:
        raise DatabaseError(f"Version query failed: {exc}") from exc
    return PgDb(pool=pool)


def execute_from_file(path: str | os.PathLike[str], connect: Callable[[str], Pool]) -> None:
    """Run the statements of a script file against the configured database."""
    script = Path(path).read_text(encoding="utf-8")
    new_pg(connect).execute_sqls(_split_statements(script))


class Schema(ABC):
    """A database schema that can be created and dropped."""

    @abstractmethod
    def create(self) -> None:
        """Create the schema."""

    @abstractmethod
    def drop(self) -> None:
        """Drop the schema."""


class DefaultSchema(Schema):
    """A schema built from ``ddl/create.sql`` and ``ddl/drop.sql`` under a root."""

    def __init__(self, db: PgDb, ddl_root: Any) -> None:
        self._db = db
        self._ddl_root = ddl_root

    def create(self) -> None:
        self._db.execute_file(self._ddl_root, "ddl/create.sql")

    def drop(self) -> None:
        self._db.execute_file(self._ddl_root, "ddl/drop.sql")