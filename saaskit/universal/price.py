"""Prices held as integer minor units."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class PriceModel:
    """An amount in hundredths of the currency unit."""

    value: int = 0
    currency: str = ""

    def change(self, new_model: PriceModel) -> None:
        """Copy amount and currency from ``new_model``."""
        self.value = new_model.value
        self.currency = new_model.currency

    def decimal_value(self) -> str:
        """The amount as a decimal string with two places."""
        return f"{self.value / 100:.2f}"

    def user_friendly(self) -> str:
        """The amount followed by the currency."""
        return f"{self.decimal_value()} {self.currency}"


class Price(ABC):
    """A price that can be changed."""

    @abstractmethod
    def model(self) -> PriceModel:
        """Return the current price model."""

    @abstractmethod
    def update(self, new_model: PriceModel) -> None:
        """Replace the price with ``new_model``."""


class SolidPrice(Price):
    """Keeps a price in memory and forwards updates to a delegate."""

    def __init__(self, model: PriceModel, delegate: Price | None = None) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> PriceModel:
        return self._model

    def update(self, new_model: PriceModel) -> None:
        self._model.change(new_model)
        if self._delegate is not None:
            self._delegate.update(new_model)


def price_from_model(model: PriceModel) -> Price:
    """Wrap a model in a price with no delegate."""
    return SolidPrice(model)