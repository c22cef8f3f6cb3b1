"""Postal addresses and personal contact details."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class AddressModel:
    """A postal address."""

    line1: str = ""
    line2: str = ""
    city: str = ""
    postal_code: str = ""
    district: str = ""

    def change(self, new_model: AddressModel) -> None:
        """Copy every field from ``new_model``."""
        self.line1 = new_model.line1
        self.line2 = new_model.line2
        self.city = new_model.city
        self.postal_code = new_model.postal_code
        self.district = new_model.district


class Address(ABC):
    """An address that can be replaced."""

    @abstractmethod
    def model(self) -> AddressModel:
        """Return the current address model."""

    @abstractmethod
    def update(self, new_model: AddressModel) -> None:
        """Replace the address with ``new_model``."""


class SolidAddress(Address):
    """Keeps an address in memory and forwards updates to a delegate."""

    def __init__(self, model: AddressModel, delegate: Address | None = None) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> AddressModel:
        return self._model

    def update(self, new_model: AddressModel) -> None:
        self._model.change(new_model)
        if self._delegate is not None:
            self._delegate.update(new_model)


@dataclass
class PersonModel:
    """A person's name and contact details."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""

    def change(self, new_model: PersonModel) -> None:
        """Copy every field from ``new_model``."""
        self.first_name = new_model.first_name
        self.last_name = new_model.last_name
        self.email = new_model.email
        self.phone = new_model.phone


class Person(ABC):
    """A person whose details can be replaced."""

    @abstractmethod
    def model(self) -> PersonModel:
        """Return the current person model."""

    @abstractmethod
    def update(self, new_model: PersonModel) -> None:
        """Replace the person's details with ``new_model``."""


class SolidPerson(Person):
    """Keeps a person in memory and forwards updates to a delegate."""

    def __init__(self, model: PersonModel, delegate: Person | None = None) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> PersonModel:
        return self._model

    def update(self, new_model: PersonModel) -> None:
        self._model.change(new_model)
        if self._delegate is not None:
            self._delegate.update(new_model)