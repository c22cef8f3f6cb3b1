"""Translations stored in a table related to their owner."""

from __future__ import annotations

from dataclasses import dataclass

from saaskit.database.pg import PgDb, RelationEntity
from saaskit.universal.localization import (
    Localization,
    LocalizationModel,
    Localizations,
    SolidLocalization,
)
from saaskit.universal.name import slugged_name


@dataclass
class PgLocalization(Localization):
    """One stored translation, addressed by owner, language and country."""

    db: PgDb
    id: int
    owner: RelationEntity

    def update(self, model: LocalizationModel) -> None:
        translation = model.translation
        query = (
            f"update {self.owner.table_name} set translation_value = $1, "
            f"translation_slug = $2 where {self.owner.column_name} = $3 "
            "and language = $4 and country = $5"
        )
        self.db.pool.execute(
            query,
            (
                translation.value,
                translation.slug,
                self.owner.relation_id,
                model.language,
                model.country,
            ),
        )

    def model(self) -> LocalizationModel:
        return LocalizationModel()


@dataclass
class PgLocalizations(Localizations):
    """All translations belonging to one owner."""

    db: PgDb
    owner: RelationEntity

    def add(self, country: str, language: str, translation: str) -> Localization:
        name = slugged_name(translation)
        query = (
            f"INSERT INTO {self.owner.table_name} ({self.owner.column_name}, "
            "country, language, translation_value, translation_slug) "
            "VALUES( $1, $2, $3, $4, $5) returning id"
        )
        row = self.db.pool.query_row(
            query,
            (self.owner.relation_id, country, language, name.value, name.slug),
        )
        localization_id = int(row[0])
        return SolidLocalization(
            LocalizationModel(
                id=localization_id,
                owner_id=self.owner.relation_id,
                country=country,
                language=language,
                translation=name,
            ),
            PgLocalization(self.db, localization_id, self.owner),
        )