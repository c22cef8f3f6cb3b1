"""User accounts identified by a token."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class AccountModel:
    """Account data: the token that identifies the account."""

    token: str = ""

    def change(self, new_model: AccountModel) -> None:
        """Take the token from ``new_model``."""
        self.token = new_model.token


class Account(ABC):
    """An account that can be changed."""

    @abstractmethod
    def model(self) -> AccountModel:
        """Return the current account model."""

    @abstractmethod
    def update(self, new_model: AccountModel) -> None:
        """Replace the account with ``new_model``."""


class SolidAccount(Account):
    """Keeps an account in memory and forwards updates to a delegate."""

    def __init__(self, model: AccountModel, delegate: Account | None = None) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> AccountModel:
        return self._model

    def update(self, new_model: AccountModel) -> None:
        self._model.change(new_model)
        if self._delegate is not None:
            self._delegate.update(new_model)