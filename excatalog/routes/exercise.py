from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Query

from excatalog.models import (
    Catalog,
    CatalogRecord,
    CatalogStats,
    ExerciseFilter,
    FilterOptions,
    ResolveResult,
    SearchResult,
)
from excatalog.models.exercise import Difficulty, Force, Mechanic
from excatalog.services.catalog import (
    CatalogStore,
    catalog_stats,
    filter_options,
    lookup_by_id,
    search_catalog,
)
from excatalog.services.resolver import resolve
from excatalog.settings import settings
from excatalog.utils.extract import DEFAULT_ANNOTATION_PATTERNS, NameExtractor
from excatalog.utils.log import logger
from excatalog.utils.similarity import similarity

router = APIRouter(prefix="/exercise", tags=["exercise"])

catalog_store = CatalogStore(delimiter=settings.DATASET_DELIMITER)


def get_catalog() -> Catalog:  # pragma: no cover
    """Fetch the published catalog"""
    return catalog_store.current()


def get_catalog_store() -> CatalogStore:  # pragma: no cover
    return catalog_store


@lru_cache
def get_extractor() -> NameExtractor:
    return NameExtractor(DEFAULT_ANNOTATION_PATTERNS + settings.EXTRA_ANNOTATION_PATTERNS)


@router.get("/all", response_model=SearchResult)
def get_all_exercises(
    muscle_group: str | None = None,
    equipment: str | None = None,
    difficulty: Difficulty | None = None,
    force: Force | None = None,
    mechanic: Mechanic | None = None,
    q: str | None = None,
    limit: int = Query(default=20, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    catalog: Catalog = Depends(get_catalog),
):
    """Browse the catalog with optional filters"""
    exercise_filter = ExerciseFilter(
        muscle_group=muscle_group,
        equipment=equipment,
        difficulty=difficulty,
        force=force,
        mechanic=mechanic,
        search_term=q,
    )
    return search_catalog(catalog, exercise_filter, limit=limit, offset=offset)


@router.get("/resolve", response_model=ResolveResult)
def resolve_exercise(
    q: str = Query(min_length=1),
    threshold: float = Query(default=settings.MATCH_THRESHOLD, ge=0.0, le=1.0),
    catalog: Catalog = Depends(get_catalog),
    extractor: NameExtractor = Depends(get_extractor),
):
    """Resolve a free-text workout line to a catalog exercise"""
    cleaned = extractor.extract(q)
    match = resolve(q, catalog, threshold=threshold, extractor=extractor)

    if match is None:
        logger.info(f"No catalog match for {q!r} (cleaned={cleaned!r})")
        return ResolveResult(query=q, cleaned_name=cleaned)

    return ResolveResult(
        query=q,
        cleaned_name=cleaned,
        match=match,
        score=similarity(cleaned, match.name),
    )


@router.get("/stats", response_model=CatalogStats)
def get_stats(catalog: Catalog = Depends(get_catalog)):
    return catalog_stats(catalog)


@router.get("/filters", response_model=FilterOptions)
def get_filters(catalog: Catalog = Depends(get_catalog)):
    return filter_options(catalog)


@router.post("/reload")
def reload_catalog(store: CatalogStore = Depends(get_catalog_store)):
    """Rebuild the catalog from its source and publish it"""
    catalog = store.reload()
    return {
        "exercises": len(catalog),
        "collisions": list(catalog.collisions),
        "built_at": catalog.built_at,
    }


@router.get("/{exercise_id}", response_model=CatalogRecord)
def get_exercise(exercise_id: str, catalog: Catalog = Depends(get_catalog)):
    record = lookup_by_id(exercise_id, catalog)
    if record is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return record
