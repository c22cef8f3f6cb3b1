"""Ratings attached to a database row."""

from __future__ import annotations

from dataclasses import dataclass

from saaskit.database.pg import PgDb, TableEntity
from saaskit.universal.rating import Rating, RatingModel, Ratings, SolidRating


@dataclass
class PgRating(Rating):
    """A stored rating; it holds no columns yet."""

    db: PgDb
    id: int

    def model(self) -> RatingModel:
        return RatingModel()

    def update(self, new_model: RatingModel) -> None:
        return None


@dataclass
class PgRatings(Ratings):
    """Ratings owned by a table row; nothing is persisted yet."""

    db: PgDb
    owner_table: TableEntity

    def add(self, model: RatingModel) -> Rating:
        return SolidRating(None, None, 0)

    def by_id(self, id: int) -> Rating:
        return SolidRating(None)