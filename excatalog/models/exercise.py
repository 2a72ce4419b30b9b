from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, StringConstraints

from excatalog.utils.dates import dt_to_iso

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=200),
]

MuscleStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

EquipmentStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

Difficulty = Literal["Novice", "Beginner", "Intermediate", "Advanced", "Expert"]
Force = Literal["Push", "Pull", "Hold", "Static"]
Grip = Literal[
    "Overhand: Pronated",
    "Underhand: Supinated",
    "Neutral",
    "Mixed",
    "Hook",
    "Wide",
    "Narrow",
]
Mechanic = Literal["Isolation", "Compound"]


class CatalogRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str  # "<muscle-slug>-<name-slug>"
    muscle_group: MuscleStr
    name: NameStr
    equipment: EquipmentStr

    video_links: tuple[str, ...] = ()
    difficulty: Difficulty = "Beginner"
    force: Force | None = None
    grip: Grip | None = None
    mechanic: Mechanic | None = None
    instructions: tuple[str, ...] = ()

    search_keywords: frozenset[str] = frozenset()

    def to_ddb_item(self, pk: str, imported_at: datetime) -> dict:
        data = self.model_dump()
        data["PK"] = pk
        data["SK"] = f"EXERCISE#{self.id}"
        data["type"] = "exercise"
        data["video_links"] = list(self.video_links)
        data["instructions"] = list(self.instructions)
        # DynamoDB string sets can't be empty, a sorted list keeps items stable
        data["search_keywords"] = sorted(self.search_keywords)
        data["imported_at"] = dt_to_iso(imported_at)
        return data

    @classmethod
    def from_ddb_item(cls, item: dict) -> "CatalogRecord":
        fields = {k: v for k, v in item.items() if k in cls.model_fields}
        return cls(**fields)
