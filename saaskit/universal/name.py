"""Names with URL-friendly slugs."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

_INVALID_CHARS = re.compile(r"[^a-z0-9-]+")
_HYPHEN_RUNS = re.compile(r"-+")


def create_slug(name: str) -> str:
    """Convert a name into a URL-friendly slug."""
    slug = name.lower().replace(" ", "-").replace("_", "-")
    slug = _INVALID_CHARS.sub("", slug)
    slug = _HYPHEN_RUNS.sub("-", slug)
    return slug.strip("-")


@dataclass
class NameModel:
    """A display value together with its slug."""

    value: str = ""
    slug: str = ""

    def change(self, name: str) -> None:
        """Set a new value and recompute the slug from it."""
        self.value = name
        self.slug = create_slug(name)


def empty_name_model() -> NameModel:
    """Return a name model with empty value and slug."""
    return NameModel()


def slugged_name(name: str) -> NameModel:
    """Return a name model whose slug is derived from ``name``."""
    return NameModel(value=name, slug=create_slug(name))


class Name(ABC):
    """A named thing whose name can be changed."""

    @abstractmethod
    def model(self) -> NameModel:
        """Return the current name model."""

    @abstractmethod
    def update(self, new_model: NameModel) -> None:
        """Replace the name with the one in ``new_model``."""


class SolidName(Name):
    """Keeps a name model in memory and forwards updates to a delegate."""

    def __init__(self, model: NameModel, delegate: Name | None = None) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> NameModel:
        return self._model

    def update(self, new_model: NameModel) -> None:
        self._model.change(new_model.value)
        if self._delegate is not None:
            self._delegate.update(self._model)


def name_from_model(model: NameModel) -> Name:
    """Wrap a model in a name with no delegate."""
    return SolidName(model)