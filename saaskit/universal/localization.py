"""Per-country, per-language translations of a name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from saaskit.universal.name import NameModel


@dataclass
class LocalizationModel:
    """A translation of something owned by another entity."""

    id: int = 0
    owner_id: int = 0
    country: str = ""
    language: str = ""
    translation: NameModel = field(default_factory=NameModel)

    def change(self, new_model: LocalizationModel) -> None:
        """Copy country, language and translation from ``new_model``."""
        self.country = new_model.country
        self.language = new_model.language
        self.translation.change(new_model.translation.value)


class Localization(ABC):
    """A translation that can be changed."""

    @abstractmethod
    def model(self) -> LocalizationModel:
        """Return the current localization model."""

    @abstractmethod
    def update(self, new_model: LocalizationModel) -> None:
        """Replace the localization with ``new_model``."""


class SolidLocalization(Localization):
    """Keeps a localization in memory and forwards updates to a delegate."""

    def __init__(
        self, model: LocalizationModel, delegate: Localization | None = None
    ) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> LocalizationModel:
        return self._model

    def update(self, new_model: LocalizationModel) -> None:
        self._model.change(new_model)
        if self._delegate is not None:
            self._delegate.update(new_model)


def localization_from_model(model: LocalizationModel) -> Localization:
    """Wrap a model in a localization with no delegate."""
    return SolidLocalization(model)


class Localizations(ABC):
    """A collection of translations belonging to one owner."""

    @abstractmethod
    def add(self, country: str, language: str, translation: str) -> Localization:
        """Add a translation for the given country and language."""