import pytest

from saaskit.database.pg import NoRowsError, PgDb, Pool, RelationEntity, TableEntity
from saaskit.universal.localization import LocalizationModel
from saaskit.universal.name import NameModel
from saaskit.universal.pg_localization import PgLocalization, PgLocalizations


class FakePool(Pool):
    def __init__(self, row=None):
        self.calls = []
        self.row = row

    def execute(self, sql, params=()):
        self.calls.append((sql, params))

    def query(self, sql, params=()):
        self.calls.append((sql, params))
        return [] if self.row is None else [self.row]

    def query_row(self, sql, params=()):
        self.calls.append((sql, params))
        if self.row is None:
            raise NoRowsError("no rows")
        return self.row


@pytest.fixture
def owner():
    return TableEntity("offer", 3).relation_entity("offer_localization")


def test_add_returns_model_with_new_id(owner):
    pool = FakePool(row=(42,))
    localization = PgLocalizations(PgDb(pool), owner).add("no", "nb", "kot")
    model = localization.model()
    assert model.id == 42
    assert model.owner_id == 3
    assert (model.country, model.language) == ("no", "nb")
    assert model.translation == NameModel("kot", "kot")


def test_add_issues_insert(owner):
    pool = FakePool(row=(1,))
    PgLocalizations(PgDb(pool), owner).add("pl", "pl", "kot")
    sql, params = pool.calls[0]
    assert sql.startswith("INSERT INTO offer_localization (offer_id, country")
    assert sql.endswith("returning id")
    assert params == (3, "pl", "pl", "kot", "kot")


def test_add_without_returned_row_raises(owner):
    with pytest.raises(NoRowsError):
        PgLocalizations(PgDb(FakePool()), owner).add("pl", "pl", "kot")


def test_localization_model_is_empty():
    owner = RelationEntity("t", 1, "c")
    assert PgLocalization(PgDb(FakePool()), 1, owner).model() == LocalizationModel()