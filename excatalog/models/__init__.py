from .catalog import Catalog
from .exercise import CatalogRecord
from .search import (
    CatalogStats,
    ExerciseFilter,
    FilterOptions,
    ResolveResult,
    SearchResult,
)

__all__ = [
    "Catalog",
    "CatalogRecord",
    "CatalogStats",
    "ExerciseFilter",
    "FilterOptions",
    "ResolveResult",
    "SearchResult",
]
