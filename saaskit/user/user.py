"""Users, their lookup and their collections."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from saaskit.filestore.filesystem import FileSystem
from saaskit.universal.contact import (
    Address,
    AddressModel,
    Person,
    PersonModel,
    SolidAddress,
    SolidPerson,
)
from saaskit.user.account import Account, AccountModel, SolidAccount
from saaskit.user.settings import (
    SolidUserSettings,
    UserSettings,
    UserSettingsModel,
    new_user_settings_model,
)


class UserFs(str, Enum):
    """Well-known file systems every user may have."""

    USER_AVATAR = "user-avatar"


@dataclass
class UserModel:
    """Everything known about a user."""

    id: int = 0
    person: PersonModel = field(default_factory=PersonModel)
    address: AddressModel = field(default_factory=AddressModel)
    account: AccountModel = field(default_factory=AccountModel)
    settings: UserSettingsModel = field(default_factory=new_user_settings_model)


def new_user_model() -> UserModel:
    """Return a user with empty details and default settings."""
    return UserModel()


class User(ABC):
    """A user and the parts of it that can be changed."""

    @abstractmethod
    def model(self) -> UserModel:
        """Return the current user model."""

    @abstractmethod
    def account(self) -> Account:
        """Return the user's account."""

    @abstractmethod
    def person(self) -> Person:
        """Return the user's personal details."""

    @abstractmethod
    def address(self) -> Address:
        """Return the user's address."""

    @abstractmethod
    def settings(self) -> UserSettings:
        """Return the user's settings."""

    @abstractmethod
    def file_system(self, name: str) -> FileSystem | None:
        """Return the user's file system called ``name``."""

    @abstractmethod
    def archive(self) -> None:
        """Archive the user."""


class SolidUser(User):
    """Keeps a user in memory and forwards changes to a delegate."""

    def __init__(
        self, model: UserModel, delegate: User | None = None, id: int = 0
    ) -> None:
        self.id = id
        self._model = model
        self._delegate = delegate

    def model(self) -> UserModel:
        return self._model

    def person(self) -> Person:
        delegate = self._delegate.person() if self._delegate is not None else None
        return SolidPerson(self._model.person, delegate)

    def address(self) -> Address:
        delegate = self._delegate.address() if self._delegate is not None else None
        return SolidAddress(self._model.address, delegate)

    def settings(self) -> UserSettings:
        if self._delegate is None:
            return SolidUserSettings(self._model.settings, id=self.id)
        return self._delegate.settings()

    def account(self) -> Account:
        if self._delegate is None:
            return SolidAccount(self._model.account)
        return self._delegate.account()

    def file_system(self, name: str) -> FileSystem | None:
        if self._delegate is None:
            raise LookupError(f"user has no file system named {name!r}")
        return self._delegate.file_system(name)

    def archive(self) -> None:
        return None


class UserSearch(ABC):
    """Finds users by their details."""

    @abstractmethod
    def by_phone(self, phone: str) -> User | None:
        """Return the user with the given phone number."""


class Users(ABC):
    """The collection of all users."""

    @abstractmethod
    def add(self, model: PersonModel) -> User:
        """Create a user from personal details."""

    @abstractmethod
    def by_id(self, id: int) -> User:
        """Return the user with the given identifier."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user."""

    @abstractmethod
    def search(self) -> UserSearch:
        """Return a search over the users."""

    @abstractmethod
    def establish_account(self, model: UserModel) -> User:
        """Find or create the user described by ``model`` and set its account."""


def user_models(users: Iterable[User]) -> list[UserModel]:
    """Return the models of ``users`` in order."""
    return [user.model() for user in users]