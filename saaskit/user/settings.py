"""Per-user settings: search radar and avatar."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from saaskit.universal.description import Description, DescriptionModel, SolidDescription
from saaskit.universal.geo import Radar, RadarModel, SolidRadar, new_radar_model


@dataclass
class UserSettingsModel:
    """The settings a user can adjust."""

    radar: RadarModel = field(default_factory=new_radar_model)
    avatar: DescriptionModel = field(default_factory=DescriptionModel)


def new_user_settings_model() -> UserSettingsModel:
    """Return settings with a radar at the origin and an empty avatar."""
    return UserSettingsModel()


class UserSettings(ABC):
    """Access to a user's settings."""

    @abstractmethod
    def model(self) -> UserSettingsModel:
        """Return the current settings model."""

    @abstractmethod
    def radar(self) -> Radar | None:
        """Return the user's search radar."""

    @abstractmethod
    def avatar(self) -> Description:
        """Return the user's avatar."""


class SolidUserSettings(UserSettings):
    """Keeps settings in memory and forwards changes to a delegate."""

    def __init__(
        self,
        model: UserSettingsModel,
        delegate: UserSettings | None = None,
        id: int = 0,
    ) -> None:
        self.id = id
        self._model = model
        self._delegate = delegate

    def model(self) -> UserSettingsModel:
        return self._model

    def radar(self) -> Radar:
        delegate = self._delegate.radar() if self._delegate is not None else None
        return SolidRadar(self._model.radar, delegate)

    def avatar(self) -> Description:
        delegate = self._delegate.avatar() if self._delegate is not None else None
        return SolidDescription(self._model.avatar, delegate)