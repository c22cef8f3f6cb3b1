"""Database-backed address, description, name, person, position and price fields."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Callable

from saaskit.database.pg import PgDb, TableEntity
from saaskit.universal.contact import Address, AddressModel, Person, PersonModel
from saaskit.universal.description import Description, DescriptionModel
from saaskit.universal.geo import Position, PositionModel
from saaskit.universal.name import Name, NameModel
from saaskit.universal.price import Price, PriceModel

MapName = Callable[[Iterator[Any]], None]
MapDescription = Callable[[Iterator[Any]], None]


def _take(columns: Iterator[Any], what: str) -> Any:
    try:
        return next(columns)
    except StopIteration:
        raise ValueError(f"row has no column left for {what}") from None


@dataclass
class PgAddress(Address):
    """Address columns of a table row."""

    db: PgDb
    table_entity: TableEntity

    def update(self, model: AddressModel) -> None:
        query = (
            f"update {self.table_entity.name} set address_line1 = $1, "
            "address_line2 = $2, address_city = $3, address_postal_code = $4, "
            "address_district = $5 where id = $6"
        )
        self.db.pool.execute(
            query,
            (
                model.line1,
                model.line2,
                model.city,
                model.postal_code,
                model.district,
                self.table_entity.id,
            ),
        )

    def model(self) -> AddressModel:
        return AddressModel()


@dataclass
class PgDescription(Description):
    """Description text and image URL kept in two columns of a table row."""

    db: PgDb
    table_entity: TableEntity
    value_column: str = "description_value"
    url_column: str = "description_url"

    def update(self, model: DescriptionModel) -> None:
        query = (
            f"update {self.table_entity.name} set {self.value_column} = $1, "
            f"{self.url_column} = $2 where id = $3"
        )
        self.db.pool.execute(
            query, (model.value, model.image_url, self.table_entity.id)
        )

    def model(self) -> DescriptionModel:
        return DescriptionModel()


def new_pg_description_from_table(db: PgDb, entity: TableEntity) -> PgDescription:
    """Description stored in the default columns of ``entity``."""
    return PgDescription(db, entity)


def new_pg_description_from_db(db: PgDb, id: int) -> PgDescription:
    """Description stored in row ``id`` of the ``description`` table."""
    return new_pg_description_from_table(db, TableEntity(name="description", id=id))


@dataclass
class PgName(Name):
    """Name value and slug columns of a table row."""

    db: PgDb
    table_entity: TableEntity

    def update(self, model: NameModel) -> None:
        query = (
            f"update {self.table_entity.name} set name_value = $1, "
            "name_slug = $2 where id = $3"
        )
        self.db.pool.execute(query, (model.value, model.slug, self.table_entity.id))

    def model(self) -> NameModel:
        return NameModel()


@dataclass
class PgPerson(Person):
    """Personal detail columns of a table row."""

    db: PgDb
    table_entity: TableEntity

    def update(self, model: PersonModel) -> None:
        query = (
            f"update {self.table_entity.name} set person_first_name = $1, "
            "person_last_name = $2, person_email = $3, person_phone = $4 "
            "where id = $5"
        )
        self.db.pool.execute(
            query,
            (
                model.first_name,
                model.last_name,
                model.email,
                model.phone,
                self.table_entity.id,
            ),
        )

    def model(self) -> PersonModel:
        return PersonModel()


@dataclass
class PgPosition(Position):
    """Latitude and longitude columns of a table row."""

    db: PgDb
    table_entity: TableEntity

    def update(self, model: PositionModel) -> None:
        query = (
            f"update {self.table_entity.name} set position_latitude = $1, "
            "position_longitude = $2 where id = $3"
        )
        self.db.pool.execute(query, (model.lat, model.lon, self.table_entity.id))

    def model(self) -> PositionModel:
        return PositionModel()


@dataclass
class PgPrice(Price):
    """Price value and currency columns of a table row."""

    db: PgDb
    table_entity: TableEntity

    def update(self, model: PriceModel) -> None:
        query = (
            f"update {self.table_entity.name} set price_value = $1, "
            "price_currency = $2 where id = $3"
        )
        self.db.pool.execute(
            query, (model.value, model.currency, self.table_entity.id)
        )

    def model(self) -> PriceModel:
        return PriceModel()


def use_map_name(name_model: NameModel) -> MapName:
    """Return a mapper that fills ``name_model`` from the next two columns."""

    def map_name(columns: Iterator[Any]) -> None:
        name_model.value = _take(columns, "name value")
        name_model.slug = _take(columns, "name slug")

    return map_name


def use_map_description(model: DescriptionModel) -> MapDescription:
    """Return a mapper that fills ``model`` from the next two columns."""

    def map_description(columns: Iterator[Any]) -> None:
        model.value = _take(columns, "description value")
        model.image_url = _take(columns, "description image url")

    return map_description