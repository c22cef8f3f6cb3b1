"""Scored ratings and collections of them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class RatingModel:
    """A score with an explanatory description."""

    description: str = ""
    score: int = 0

    def change(self, new_model: RatingModel) -> None:
        """Copy score and description from ``new_model``."""
        self.score = new_model.score
        self.description = new_model.description


class Rating(ABC):
    """A rating that can be revised."""

    @abstractmethod
    def model(self) -> RatingModel:
        """Return the current rating model."""

    @abstractmethod
    def update(self, new_model: RatingModel) -> None:
        """Replace the rating with ``new_model``."""


class SolidRating(Rating):
    """Keeps a rating in memory; updates stay local."""

    def __init__(
        self,
        model: RatingModel | None,
        delegate: Rating | None = None,
        id: int = 0,
    ) -> None:
        self.id = id
        self._model = model
        self._delegate = delegate

    def model(self) -> RatingModel | None:
        return self._model

    def update(self, new_model: RatingModel) -> None:
        self._model.change(new_model)


class Ratings(ABC):
    """A store of ratings."""

    @abstractmethod
    def by_id(self, id: int) -> Rating:
        """Look up a rating by its identifier."""

    @abstractmethod
    def add(self, model: RatingModel) -> Rating:
        """Store a new rating."""


class SolidRatings:
    """Front for a ratings store."""

    def __init__(self, ratings: Ratings) -> None:
        self._ratings = ratings

    def add(self, model: RatingModel) -> Rating:
        return self._ratings.add(model)

    def by_id(self, id: int) -> Rating:
        return self._ratings.by_id(id)