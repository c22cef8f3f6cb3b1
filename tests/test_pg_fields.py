import pytest

from saaskit.database.pg import NoRowsError, PgDb, Pool, TableEntity
from saaskit.universal.contact import AddressModel, PersonModel
from saaskit.universal.description import DescriptionModel
from saaskit.universal.geo import PositionModel
from saaskit.universal.name import NameModel, SolidName
from saaskit.universal.pg_fields import (
    PgAddress,
    PgDescription,
    PgName,
    PgPerson,
    PgPosition,
    PgPrice,
    new_pg_description_from_db,
    new_pg_description_from_table,
    use_map_description,
    use_map_name,
)
from saaskit.universal.price import PriceModel


class FakePool(Pool):
    def __init__(self, row=None, fail=None):
        self.calls = []
        self.row = row
        self.fail = fail

    def execute(self, sql, params=()):
        self.calls.append((sql, params))
        if self.fail is not None:
            raise self.fail

    def query(self, sql, params=()):
        self.calls.append((sql, params))
        return [] if self.row is None else [self.row]

    def query_row(self, sql, params=()):
        self.calls.append((sql, params))
        if self.row is None:
            raise NoRowsError("no rows")
        return self.row


@pytest.fixture
def pool():
    return FakePool()


@pytest.fixture
def db(pool):
    return PgDb(pool=pool)


def test_address_update(db, pool):
    field = PgAddress(db, TableEntity("users", 7))
    field.update(AddressModel("a", "b", "c", "d", "e"))
    sql, params = pool.calls[0]
    assert sql.startswith("update users set address_line1 = $1")
    assert sql.endswith("where id = $6")
    assert params == ("a", "b", "c", "d", "e", 7)
    assert field.model() == AddressModel()


def test_address_model_is_empty(db):
    assert PgAddress(db, TableEntity("users", 1)).model() == AddressModel()


def test_description_defaults(db, pool):
    field = new_pg_description_from_db(db, 5)
    assert field.table_entity == TableEntity("description", 5)
    field.update(DescriptionModel("text", "img"))
    sql, params = pool.calls[0]
    assert "description_value = $1" in sql
    assert "description_url = $2" in sql
    assert params == ("text", "img", 5)


def test_description_custom_columns(db, pool):
    field = PgDescription(db, TableEntity("users", 3), "avatar_value", "avatar_url")
    field.update(DescriptionModel("v", "u"))
    sql, params = pool.calls[0]
    assert sql.startswith("update users set avatar_value = $1, avatar_url = $2")
    assert params == ("v", "u", 3)
    assert field.model() == DescriptionModel()


def test_description_from_table(db):
    entity = TableEntity("offer", 9)
    field = new_pg_description_from_table(db, entity)
    assert (field.value_column, field.url_column) == (
        "description_value",
        "description_url",
    )
    assert field.table_entity == entity


def test_name_update(db, pool):
    field = PgName(db, TableEntity("offer", 2))
    field.update(NameModel("v", "s"))
    sql, params = pool.calls[0]
    assert "name_value = $1, name_slug = $2" in sql
    assert params == ("v", "s", 2)
    assert field.model() == NameModel()


def test_solid_name_forwards_slugged_model(db, pool):
    model = NameModel()
    SolidName(model, PgName(db, TableEntity("offer", 4))).update(
        NameModel("Hello World")
    )
    assert pool.calls[0][1] == ("Hello World", "hello-world", 4)
    assert model.slug == "hello-world"


def test_person_update(db, pool):
    PgPerson(db, TableEntity("users", 8)).update(
        PersonModel("Ann", "Lee", "ann@example.com", "555")
    )
    sql, params = pool.calls[0]
    assert "person_first_name = $1" in sql
    assert params == ("Ann", "Lee", "ann@example.com", "555", 8)
    assert PgPerson(db, TableEntity("users", 8)).model() == PersonModel()


def test_position_update(db, pool):
    PgPosition(db, TableEntity("users", 1)).update(PositionModel(10, 20))
    sql, params = pool.calls[0]
    assert "position_latitude = $1, position_longitude = $2" in sql
    assert params == (10, 20, 1)
    assert PgPosition(db, TableEntity("users", 1)).model() == PositionModel()


def test_price_update(db, pool):
    PgPrice(db, TableEntity("offer", 6)).update(PriceModel(1250, "NOK"))
    sql, params = pool.calls[0]
    assert "price_value = $1, price_currency = $2" in sql
    assert params == (1250, "NOK", 6)
    assert PgPrice(db, TableEntity("offer", 6)).model() == PriceModel()


def test_update_error_propagates():
    db = PgDb(pool=FakePool(fail=RuntimeError("boom")))
    with pytest.raises(RuntimeError):
        PgName(db, TableEntity("offer", 1)).update(NameModel("x", "x"))


def test_mappers_consume_columns_in_order():
    name = NameModel()
    description = DescriptionModel()
    columns = iter(["n", "s", "d", "u"])
    use_map_name(name)(columns)
    use_map_description(description)(columns)
    assert name == NameModel("n", "s")
    assert description == DescriptionModel("d", "u")


def test_mapper_with_too_few_columns():
    with pytest.raises(ValueError):
        use_map_name(NameModel())(iter(["only"]))