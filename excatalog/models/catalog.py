from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from excatalog.models.exercise import CatalogRecord
from excatalog.utils.dates import now


class Catalog(BaseModel):
    """
    Ordered, read-only collection of exercise records.

    Records keep dataset order. The id index is built once on construction;
    when two records share an id the first one wins and the id is listed in
    `collisions`.
    """

    model_config = ConfigDict(frozen=True)

    records: tuple[CatalogRecord, ...] = ()
    built_at: datetime = Field(default_factory=now)
    collisions: tuple[str, ...] = ()

    _by_id: dict[str, CatalogRecord] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        index: dict[str, CatalogRecord] = {}
        for record in self.records:
            index.setdefault(record.id, record)
        self._by_id = index

    def __len__(self) -> int:
        return len(self.records)

    def get(self, exercise_id: str) -> CatalogRecord | None:
        return self._by_id.get(exercise_id)

    @property
    def ids(self) -> list[str]:
        return list(self._by_id)
