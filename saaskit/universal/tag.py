"""Tags attached to entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields


@dataclass
class TagModel:
    """A tag; it carries no fields of its own."""

    def change(self, new_model: TagModel) -> None:
        """Copy every field of ``new_model`` onto this tag."""
        for field in fields(self):
            setattr(self, field.name, getattr(new_model, field.name))


class Tag(ABC):
    """A tag that can be updated."""

    @abstractmethod
    def model(self) -> TagModel:
        """Return the current tag model."""

    @abstractmethod
    def update(self, new_model: TagModel) -> None:
        """Replace the tag with ``new_model``."""


class SolidTag(Tag):
    """Keeps a tag in memory and forwards updates to a delegate."""

    def __init__(self, model: TagModel, delegate: Tag | None = None) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> TagModel:
        return self._model

    def update(self, new_model: TagModel) -> None:
        self._model.change(new_model)
        if self._delegate is not None:
            self._delegate.update(new_model)


def tag_from_model(model: TagModel) -> Tag:
    """Wrap a model in a tag with no delegate."""
    return SolidTag(model)