import pytest

from saaskit.universal.contact import (
    Address,
    AddressModel,
    Person,
    PersonModel,
    SolidAddress,
    SolidPerson,
)


class RecordingAddress(Address):
    def __init__(self):
        self.received = []

    def model(self):
        return AddressModel()

    def update(self, new_model):
        self.received.append(new_model)


class FailingPerson(Person):
    def model(self):
        return PersonModel()

    def update(self, new_model):
        raise ConnectionError("down")


class RecordingPerson(Person):
    def __init__(self):
        self.received = []

    def model(self):
        return PersonModel()

    def update(self, new_model):
        self.received.append(new_model)


ADDRESS = AddressModel(
    line1="1 Sample Road",
    line2="Flat 2",
    city="Sampletown",
    postal_code="00000",
    district="North",
)
PERSON = PersonModel(
    first_name="Ann", last_name="Example", email="ann@example.com", phone="555"
)


def test_address_change_copies_all_fields():
    model = AddressModel()
    model.change(ADDRESS)
    assert model == ADDRESS


def test_solid_address_updates_and_forwards():
    model = AddressModel()
    delegate = RecordingAddress()
    address = SolidAddress(model, delegate)
    address.update(ADDRESS)
    assert address.model() is model
    assert model == ADDRESS
    assert delegate.received == [ADDRESS]


def test_solid_address_without_delegate():
    model = AddressModel(city="old")
    SolidAddress(model).update(ADDRESS)
    assert model.city == ADDRESS.city


def test_person_change_copies_all_fields():
    model = PersonModel(first_name="x")
    model.change(PERSON)
    assert model == PERSON


def test_solid_person_forwards_new_model():
    delegate = RecordingPerson()
    model = PersonModel()
    SolidPerson(model, delegate).update(PERSON)
    assert delegate.received[0] is PERSON
    assert model == PERSON


def test_solid_person_delegate_error_propagates():
    model = PersonModel()
    with pytest.raises(ConnectionError):
        SolidPerson(model, FailingPerson()).update(PERSON)
    assert model.email == PERSON.email