"""Stored file records and collections of them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from saaskit.universal.description import DescriptionModel, empty_description_model
from saaskit.universal.name import NameModel, empty_name_model


@dataclass
class RecordModel:
    """A stored file: where it lives, what it is called and what it shows."""

    id: int = 0
    url: str = ""
    name: NameModel = field(default_factory=empty_name_model)
    description: DescriptionModel = field(default_factory=empty_description_model)

    def change(self, new_model: RecordModel) -> None:
        """Copy url, name and description from ``new_model``."""
        self.url = new_model.url
        self.name.change(new_model.name.value)
        self.description.change(new_model.description)


def empty_record_model() -> RecordModel:
    """Return a record with no id, url, name or description."""
    return RecordModel()


class Record(ABC):
    """A stored file record that can be changed."""

    @abstractmethod
    def model(self) -> RecordModel:
        """Return the current record model."""

    @abstractmethod
    def update(self, new_model: RecordModel) -> None:
        """Replace the record with ``new_model``."""


class SolidRecord(Record):
    """Keeps a record in memory and forwards updates to a delegate."""

    def __init__(self, model: RecordModel, delegate: Record | None = None) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> RecordModel:
        return self._model

    def update(self, new_model: RecordModel) -> None:
        self._model.change(new_model)
        if self._delegate is not None:
            self._delegate.update(new_model)


class Records(ABC):
    """A place that stores file records."""

    @abstractmethod
    def add(self, model: RecordModel) -> Record:
        """Store a new record described by ``model``."""


class NoRecords(Records):
    """A store that keeps nothing; added records live only in memory."""

    def add(self, model: RecordModel) -> Record:
        return SolidRecord(model)