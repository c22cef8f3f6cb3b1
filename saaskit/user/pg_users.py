"""Users stored in the ``users`` table."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from saaskit.database.pg import PgDb, TableEntity
from saaskit.filestore.filesystem import FileSystem
from saaskit.universal.contact import Address, AddressModel, Person, PersonModel
from saaskit.universal.description import Description
from saaskit.universal.geo import Radar
from saaskit.universal.pg_fields import PgAddress, PgDescription, PgPerson
from saaskit.universal.pg_rating import PgRatings
from saaskit.universal.rating import Ratings
from saaskit.user.account import Account, AccountModel
from saaskit.user.settings import UserSettings, UserSettingsModel
from saaskit.user.user import (
    SolidUser,
    User,
    UserModel,
    UserSearch,
    Users,
    new_user_model,
)

_USERS_TABLE = "users"


def _take(columns: Iterator[Any], what: str) -> Any:
    try:
        return next(columns)
    except StopIteration:
        raise ValueError(f"user row has no column left for {what}") from None


def user_row_scan(row: Sequence[Any], user_model: UserModel) -> int:
    """Fill ``user_model`` from a ``users`` row and return the row's id."""
    columns = iter(row)
    user_id = int(_take(columns, "id"))
    user_model.id = user_id
    user_model.account.token = _take(columns, "account token")
    person = user_model.person
    person.first_name = _take(columns, "first name")
    person.last_name = _take(columns, "last name")
    person.email = _take(columns, "email")
    person.phone = _take(columns, "phone")
    address = user_model.address
    address.line1 = _take(columns, "address line 1")
    address.line2 = _take(columns, "address line 2")
    address.city = _take(columns, "city")
    address.postal_code = _take(columns, "postal code")
    address.district = _take(columns, "district")
    radar = user_model.settings.radar
    radar.perimeter = _take(columns, "radar perimeter")
    radar.position.lon = _take(columns, "radar longitude")
    radar.position.lat = _take(columns, "radar latitude")
    return user_id


@dataclass
class PgAccount(Account):
    """The account columns of a user row."""

    db: PgDb
    id: int

    def update(self, model: AccountModel) -> None:
        query = f"update {_USERS_TABLE} set account_token = $1 where id = $2"
        self.db.pool.execute(query, (model.token, self.id))

    def model(self) -> AccountModel:
        return AccountModel()


@dataclass
class PgUserSettings(UserSettings):
    """The settings columns of a user row."""

    db: PgDb
    id: int

    def model(self) -> UserSettingsModel | None:
        return None

    def radar(self) -> Radar | None:
        return None

    def avatar(self) -> Description:
        return PgDescription(
            self.db,
            TableEntity(name=_USERS_TABLE, id=self.id),
            "avatar_value",
            "avatar_url",
        )


@dataclass
class PgUser(User):
    """A row of the ``users`` table."""

    db: PgDb
    id: int

    def address(self) -> Address:
        return PgAddress(self.db, self.table_entity())

    def model(self) -> UserModel:
        return UserModel()

    def person(self) -> Person:
        return PgPerson(self.db, self.table_entity())

    def ratings(self) -> Ratings:
        return PgRatings(self.db, self.table_entity())

    def settings(self) -> UserSettings:
        return PgUserSettings(self.db, self.id)

    def account(self) -> Account:
        return PgAccount(self.db, self.id)

    def archive(self) -> None:
        return None

    def file_system(self, name: str) -> FileSystem | None:
        return None

    def table_entity(self) -> TableEntity:
        return self.db.table_entity(_USERS_TABLE, self.id)


def _solid_from_row(db: PgDb, row: Sequence[Any]) -> SolidUser:
    user_model = new_user_model()
    user_id = user_row_scan(row, user_model)
    return SolidUser(user_model, PgUser(db, user_id), user_id)


@dataclass
class PgUserSearch(UserSearch):
    """Looks users up in the ``users`` table."""

    db: PgDb

    def by_phone(self, phone: str) -> User | None:
        rows = self.db.pool.query(
            f"select * from {_USERS_TABLE} where person_phone = $1", (phone,)
        )
        if not rows:
            return None
        return _solid_from_row(self.db, rows[0])


@dataclass
class PgUsers(Users):
    """The ``users`` table."""

    db: PgDb

    def search(self) -> UserSearch:
        return PgUserSearch(self.db)

    def add(self, model: PersonModel) -> User:
        query = (
            f"INSERT INTO {_USERS_TABLE}(person_first_name, person_last_name, "
            "person_email, person_phone) VALUES( $1, $2, $3, $4 ) returning id"
        )
        row = self.db.pool.query_row(
            query, (model.first_name, model.last_name, model.email, model.phone)
        )
        user_id = int(row[0])
        return SolidUser(
            UserModel(id=user_id, person=model, address=AddressModel()),
            PgUser(self.db, user_id),
            user_id,
        )

    def by_id(self, id: int) -> User:
        row = self.db.pool.query_row(
            f"select * from {_USERS_TABLE} where id = $1", (id,)
        )
        return _solid_from_row(self.db, row)

    def list_all(self) -> list[User]:
        rows = self.db.pool.query(f"select * from {_USERS_TABLE}")
        return [_solid_from_row(self.db, row) for row in rows]

    def establish_account(self, model: UserModel) -> User:
        user = self.search().by_phone(model.person.phone)
        if user is not None:
            user.person().update(model.person)
        else:
            user = self.add(model.person)
        user.account().update(model.account)
        user.address().update(model.address)
        return user