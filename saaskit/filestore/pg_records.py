"""File systems and file records stored in the database."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from saaskit.database.pg import DatabaseError, PgDb, RelationEntity
from saaskit.filestore.filesystem import FileSystem, FileSystemModel
from saaskit.filestore.record import (
    Record,
    RecordModel,
    Records,
    SolidRecord,
    empty_record_model,
)
from saaskit.universal.pg_fields import use_map_description, use_map_name


@dataclass
class PgFileSystem(FileSystem):
    """A file system owned by a related row; nothing is persisted yet."""

    db: PgDb
    owner: RelationEntity

    def update(self, model: FileSystemModel) -> None:
        return None

    def model(self) -> FileSystemModel:
        return FileSystemModel()

    def records(self) -> Records | None:
        return None


@dataclass
class PgFileSystems:
    """The file systems kept in the database."""

    db: PgDb


def record_named_args(model: RecordModel) -> dict[str, Any]:
    """Named query arguments for the columns of ``model``."""
    return {
        "id": model.id,
        "nameValue": model.name.value,
        "nameSlug": model.name.slug,
        "descriptionValue": model.description.value,
        "descriptionImageUrl": model.description.image_url,
    }


def map_record(row: Sequence[Any]) -> RecordModel:
    """Build a record from name value, name slug, description value and image URL."""
    record = empty_record_model()
    columns = iter(row)
    use_map_name(record.name)(columns)
    use_map_description(record.description)(columns)
    return record


@dataclass
class PgRecord(Record):
    """A row of the ``filestore_record`` table."""

    db: PgDb
    id: int

    def model(self) -> RecordModel | None:
        query = (
            "select name_value, name_slug, description_value, description_image_url "
            "from filestore_record where id = @id"
        )
        try:
            row = self.db.pool.query_row(query, {"id": self.id})
            return map_record(row)
        except (DatabaseError, ValueError):
            return None

    def update(self, new_model: RecordModel) -> None:
        query = (
            "update filestore_record set name_value = @nameValue, "
            "name_slug = @nameSlug where id = @id"
        )
        args = record_named_args(new_model)
        args["id"] = self.id
        self.db.pool.execute(query, args)


@dataclass
class PgRecords(Records):
    """The ``filestore_record`` table."""

    db: PgDb

    def add(self, model: RecordModel) -> Record:
        sql = (
            "insert into filestore_record (name_value, name_slug, description_value, "
            "description_image_url) values (@nameValue, @nameSlug, @descriptionValue, "
            "@descriptionImageUrl) returning id"
        )
        row = self.db.pool.query_row(sql, record_named_args(model))
        return SolidRecord(model, PgRecord(self.db, int(row[0])))