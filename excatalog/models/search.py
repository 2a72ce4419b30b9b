from pydantic import BaseModel, Field

from excatalog.models.exercise import CatalogRecord, Difficulty, Force, Mechanic


class ExerciseFilter(BaseModel):
    muscle_group: str | None = None
    equipment: str | None = None
    difficulty: Difficulty | None = None
    force: Force | None = None
    mechanic: Mechanic | None = None
    search_term: str | None = None


class SearchResult(BaseModel):
    exercises: list[CatalogRecord]
    total_count: int
    has_more: bool


class CatalogStats(BaseModel):
    total_exercises: int
    by_muscle_group: dict[str, int] = Field(default_factory=dict)
    by_equipment: dict[str, int] = Field(default_factory=dict)
    by_difficulty: dict[str, int] = Field(default_factory=dict)


class FilterOptions(BaseModel):
    muscle_groups: list[str]
    equipment: list[str]
    difficulties: list[str]


class ResolveResult(BaseModel):
    query: str
    cleaned_name: str
    match: CatalogRecord | None = None
    score: float | None = None
