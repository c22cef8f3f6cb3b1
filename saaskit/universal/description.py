"""Free-text descriptions with an optional image."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Callable


@dataclass
class DescriptionModel:
    """Description text and the URL of an accompanying image."""

    value: str = ""
    image_url: str = ""

    def change(self, new_model: DescriptionModel) -> None:
        """Copy every field from ``new_model``."""
        self.value = new_model.value
        self.image_url = new_model.image_url


def empty_description_model() -> DescriptionModel:
    """Return a description with no text and no image."""
    return DescriptionModel()


class Description(ABC):
    """A description that can be replaced."""

    @abstractmethod
    def model(self) -> DescriptionModel:
        """Return the current description model."""

    @abstractmethod
    def update(self, new_model: DescriptionModel) -> None:
        """Replace the description with ``new_model``."""


class SolidDescription(Description):
    """Keeps a description in memory and forwards updates to a delegate."""

    def __init__(
        self, model: DescriptionModel, delegate: Description | None = None
    ) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> DescriptionModel:
        return self._model

    def update(self, new_model: DescriptionModel) -> None:
        self._model.change(new_model)
        if self._delegate is not None:
            self._delegate.update(new_model)


def description_from_model(model: DescriptionModel) -> Description:
    """Wrap a model in a description with no delegate."""
    return SolidDescription(model)


DescriptionFromUrl = Callable[[str], DescriptionModel]
DescriptionFromFile = Callable[[BinaryIO], DescriptionModel]