"""Named file systems that group stored records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from saaskit.filestore.record import NoRecords, Records
from saaskit.universal.name import NameModel


@dataclass
class FileSystemModel:
    """A file system's identifier and name."""

    id: int = 0
    name: NameModel = field(default_factory=NameModel)

    def change(self, new_model: FileSystemModel) -> None:
        """Take the name from ``new_model``."""
        self.name.change(new_model.name.value)


class FileSystem(ABC):
    """A file system holding records."""

    @abstractmethod
    def model(self) -> FileSystemModel:
        """Return the current file system model."""

    @abstractmethod
    def update(self, new_model: FileSystemModel) -> None:
        """Replace the file system settings with ``new_model``."""

    @abstractmethod
    def records(self) -> Records:
        """Return the records kept in this file system."""


class SolidFileSystem(FileSystem):
    """Keeps a file system in memory and forwards calls to a delegate."""

    def __init__(
        self, model: FileSystemModel, delegate: FileSystem | None = None
    ) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> FileSystemModel:
        return self._model

    def update(self, new_model: FileSystemModel) -> None:
        self._model.change(new_model)
        if self._delegate is not None:
            self._delegate.update(new_model)

    def records(self) -> Records:
        if self._delegate is None:
            return NoRecords()
        return self._delegate.records()


class FileSystems(ABC):
    """A collection of file systems."""

    @abstractmethod
    def add(self, name: str, owner_id: int) -> FileSystem:
        """Create a file system called ``name`` owned by ``owner_id``."""