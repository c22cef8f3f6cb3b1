"""Geographic positions stored as micro-degrees, and search radars."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

_MICRO = 1_000_000


@dataclass
class PositionModel:
    """Latitude and longitude in millionths of a degree."""

    lat: int = 0
    lon: int = 0

    def change(self, new_model: PositionModel) -> None:
        """Copy coordinates from ``new_model``."""
        self.lat = new_model.lat
        self.lon = new_model.lon

    def lat_f(self) -> float:
        """Latitude in degrees."""
        return self.lat / _MICRO

    def lon_f(self) -> float:
        """Longitude in degrees."""
        return self.lon / _MICRO


class Position(ABC):
    """A position that can be moved."""

    @abstractmethod
    def model(self) -> PositionModel:
        """Return the current position model."""

    @abstractmethod
    def update(self, new_model: PositionModel) -> None:
        """Move to the coordinates in ``new_model``."""


class SolidPosition(Position):
    """Keeps a position in memory and forwards updates to a delegate."""

    def __init__(self, model: PositionModel, delegate: Position | None = None) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> PositionModel:
        return self._model

    def update(self, new_model: PositionModel) -> None:
        self._model.change(new_model)
        if self._delegate is not None:
            self._delegate.update(new_model)


def position_from_model(model: PositionModel) -> Position:
    """Wrap a model in a position with no delegate."""
    return SolidPosition(model)


def new_position(lat: int, lon: int) -> Position:
    """Create a position from micro-degree coordinates."""
    return position_from_model(PositionModel(lat, lon))


@dataclass
class RadarModel:
    """A centre position and a perimeter around it."""

    position: PositionModel = field(default_factory=PositionModel)
    perimeter: int = 0

    def change(self, new_model: RadarModel) -> None:
        """Copy the centre and perimeter from ``new_model``."""
        self.position.change(new_model.position)
        self.perimeter = new_model.perimeter


def new_radar_model() -> RadarModel:
    """Return a radar centred on the origin with no perimeter."""
    return RadarModel()


class Radar(ABC):
    """A radar whose centre and perimeter can change."""

    @abstractmethod
    def model(self) -> RadarModel:
        """Return the current radar model."""

    @abstractmethod
    def update(self, new_model: RadarModel) -> None:
        """Replace the radar settings with ``new_model``."""


class SolidRadar(Radar):
    """Keeps a radar in memory and forwards updates to a delegate."""

    def __init__(self, model: RadarModel, delegate: Radar | None = None) -> None:
        self._model = model
        self._delegate = delegate

    def model(self) -> RadarModel:
        return self._model

    def update(self, new_model: RadarModel) -> None:
        self._model.change(new_model)
        if self._delegate is not None:
            self._delegate.update(new_model)


def radar_from_model(model: RadarModel) -> Radar:
    """Wrap a model in a radar with no delegate."""
    return SolidRadar(model)