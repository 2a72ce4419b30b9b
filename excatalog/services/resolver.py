from typing import NamedTuple

from excatalog.models.catalog import Catalog
from excatalog.models.exercise import CatalogRecord
from excatalog.utils.extract import NameExtractor, extract_exercise_name
from excatalog.utils.similarity import similarity

DEFAULT_THRESHOLD = 0.7


class MatchCandidate(NamedTuple):
    record: CatalogRecord
    score: float


def _clean(query: str, extractor: NameExtractor | None) -> str:
    return extractor.extract(query) if extractor else extract_exercise_name(query)


def score_candidates(cleaned_name: str, catalog: Catalog) -> list[MatchCandidate]:
    """
    Score every record against an already-cleaned name, best first.
    Ties keep catalog order.
    """
    candidates = [
        MatchCandidate(record, similarity(cleaned_name, record.name))
        for record in catalog.records
    ]
    # sorted() is stable, reverse=True keeps equal scores in catalog order
    return sorted(candidates, key=lambda c: c.score, reverse=True)


def resolve(
    query: str,
    catalog: Catalog,
    threshold: float = DEFAULT_THRESHOLD,
    extractor: NameExtractor | None = None,
) -> CatalogRecord | None:
    """
    Resolve a free-text workout line ("Barbell Curl 3x10 @75lbs") to a record.

    Returns None when the cleaned name is empty or the best score is below
    `threshold`. A score equal to the threshold is accepted.
    """
    cleaned = _clean(query, extractor)
    if not cleaned:
        return None

    candidates = score_candidates(cleaned, catalog)
    if candidates and candidates[0].score >= threshold:
        return candidates[0].record
    return None


def rank(
    query: str,
    catalog: Catalog,
    limit: int = 5,
    extractor: NameExtractor | None = None,
) -> list[MatchCandidate]:
    """Top scoring candidates for a query, zero scores dropped."""
    cleaned = _clean(query, extractor)
    if not cleaned:
        return []
    return [c for c in score_candidates(cleaned, catalog) if c.score > 0][:limit]


def video_links_for(
    query: str,
    catalog: Catalog,
    threshold: float = DEFAULT_THRESHOLD,
    extractor: NameExtractor | None = None,
) -> tuple[str, ...]:
    record = resolve(query, catalog, threshold, extractor)
    return record.video_links if record else ()
