import pytest

from saaskit.universal.price import Price, PriceModel, SolidPrice, price_from_model


class FailingPrice(Price):
    def model(self):
        return PriceModel()

    def update(self, new_model):
        raise RuntimeError("no")


class RecordingPrice(Price):
    def __init__(self):
        self.received = []

    def model(self):
        return PriceModel()

    def update(self, new_model):
        self.received.append(new_model)


def test_decimal_value_has_two_places():
    assert PriceModel(value=1234, currency="EUR").decimal_value() == "12.34"


def test_decimal_value_small_amount():
    assert PriceModel(value=5).decimal_value() == "0.05"


def test_decimal_value_negative_amount():
    assert PriceModel(value=-150).decimal_value() == "-1.50"


@pytest.mark.parametrize("value", [0, 1, 99, 100, 123456, -7])
def test_user_friendly_joins_amount_and_currency(value):
    model = PriceModel(value=value, currency="NOK")
    text = model.user_friendly()
    amount, currency = text.split(" ")
    assert amount == model.decimal_value()
    assert currency == "NOK"
    assert round(float(amount) * 100) == value


def test_change_copies_fields():
    model = PriceModel()
    model.change(PriceModel(value=10, currency="USD"))
    assert model == PriceModel(value=10, currency="USD")


def test_solid_price_updates_and_forwards():
    model = PriceModel()
    delegate = RecordingPrice()
    new = PriceModel(value=500, currency="EUR")
    price = SolidPrice(model, delegate)
    price.update(new)
    assert price.model() is model
    assert model == new
    assert delegate.received == [new]


def test_delegate_error_propagates():
    model = PriceModel()
    with pytest.raises(RuntimeError):
        SolidPrice(model, FailingPrice()).update(PriceModel(value=1))
    assert model.value == 1


def test_price_from_model_wraps_same_object():
    model = PriceModel(value=3)
    assert price_from_model(model).model() is model