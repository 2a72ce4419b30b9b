import threading
from collections import Counter
from typing import Iterable

from excatalog.models.catalog import Catalog
from excatalog.models.exercise import CatalogRecord
from excatalog.models.search import (
    CatalogStats,
    ExerciseFilter,
    FilterOptions,
    SearchResult,
)
from excatalog.repositories.dataset import DatasetSource, get_dataset_source
from excatalog.utils import taxonomy
from excatalog.utils.keywords import build_search_keywords
from excatalog.utils.log import logger
from excatalog.utils.normalize import InvalidRowError, normalize_row
from excatalog.utils.rows import parse_row
from excatalog.utils.slug import build_exercise_id


def _lines(dataset: str | Iterable[str]) -> list[str]:
    if isinstance(dataset, str):
        dataset = dataset.splitlines()
    return [line for line in dataset if line.strip()]


def build_record(raw: dict[str, str]) -> CatalogRecord:
    """
    Normalise one labelled raw row into a record.
    Raises InvalidRowError when a required field is blank.
    """
    fields = normalize_row(raw)
    return CatalogRecord(
        id=build_exercise_id(fields["muscle_group"], fields["name"]),
        search_keywords=build_search_keywords(
            name=fields["name"],
            muscle_group=fields["muscle_group"],
            equipment=fields["equipment"],
            difficulty=fields["difficulty"],
            force=fields["force"],
        ),
        **fields,
    )


def build_catalog(dataset: str | Iterable[str], delimiter: str = ",") -> Catalog:
    """
    Build a catalog from a header-first delimited dataset.

    Rows with the wrong number of fields, or with a blank muscle group, name
    or equipment, are skipped. Records keep dataset order.
    """
    lines = _lines(dataset)
    if not lines:
        logger.warning("Dataset is empty, building an empty catalog")
        return Catalog()

    # spreadsheet exports often start with a byte order mark
    headers = parse_row(lines[0].lstrip("\ufeff"), delimiter)
    missing = [col for col in taxonomy.DATASET_COLUMNS if col not in headers]
    if missing:
        logger.warning(f"Dataset header is missing columns: {', '.join(missing)}")

    records: list[CatalogRecord] = []
    seen: set[str] = set()
    collisions: list[str] = []
    skipped = 0

    for line_no, line in enumerate(lines[1:], start=2):
        values = parse_row(line, delimiter)
        if len(values) != len(headers):
            logger.debug(
                f"Skipping line {line_no}: {len(values)} fields, expected {len(headers)}"
            )
            skipped += 1
            continue

        try:
            record = build_record(dict(zip(headers, values)))
        except InvalidRowError as e:
            logger.debug(f"Skipping line {line_no}: {e}")
            skipped += 1
            continue

        if record.id in seen:
            logger.warning(f"Duplicate exercise id {record.id} on line {line_no}")
            if record.id not in collisions:
                collisions.append(record.id)
        seen.add(record.id)
        records.append(record)

    logger.info(
        f"Built catalog: rows={len(lines) - 1} records={len(records)} "
        f"skipped={skipped} collisions={len(collisions)}"
    )
    return Catalog(records=tuple(records), collisions=tuple(collisions))


def load_catalog(source: DatasetSource, delimiter: str = ",") -> Catalog:
    """
    Read the dataset from `source` and build a catalog.
    DatasetReadError propagates; nothing is built on a failed read.
    """
    logger.info(f"Loading catalog from {source!r}")
    return build_catalog(source.read_text(), delimiter)


def lookup_by_id(exercise_id: str, catalog: Catalog) -> CatalogRecord | None:
    return catalog.get(exercise_id)


# ─────────────────────────────────────────────────────────────
# Browsing
# ─────────────────────────────────────────────────────────────


def _matches(record: CatalogRecord, f: ExerciseFilter) -> bool:
    if f.muscle_group and record.muscle_group != f.muscle_group:
        return False
    if f.equipment and record.equipment != f.equipment:
        return False
    if f.difficulty and record.difficulty != f.difficulty:
        return False
    if f.force and record.force != f.force:
        return False
    if f.mechanic and record.mechanic != f.mechanic:
        return False
    if f.search_term and f.search_term.strip().lower() not in record.search_keywords:
        return False
    return True


def search_catalog(
    catalog: Catalog,
    exercise_filter: ExerciseFilter | None = None,
    limit: int = 20,
    offset: int = 0,
) -> SearchResult:
    """
    Filter the catalog and return one page ordered by name.
    `search_term` must equal one of the record's search keywords.
    """
    exercise_filter = exercise_filter or ExerciseFilter()
    hits = sorted(
        (r for r in catalog.records if _matches(r, exercise_filter)),
        key=lambda r: r.name,
    )
    page = hits[offset : offset + limit]
    return SearchResult(
        exercises=page,
        total_count=len(hits),
        has_more=offset + limit < len(hits),
    )


def catalog_stats(catalog: Catalog) -> CatalogStats:
    by_difficulty = {label: 0 for label in taxonomy.DIFFICULTIES}
    by_difficulty.update(Counter(r.difficulty for r in catalog.records))

    return CatalogStats(
        total_exercises=len(catalog),
        by_muscle_group=dict(Counter(r.muscle_group for r in catalog.records)),
        by_equipment=dict(Counter(r.equipment for r in catalog.records)),
        by_difficulty=by_difficulty,
    )


def filter_options(catalog: Catalog) -> FilterOptions:
    return FilterOptions(
        muscle_groups=sorted({r.muscle_group for r in catalog.records}),
        equipment=sorted({r.equipment for r in catalog.records}),
        difficulties=list(taxonomy.DIFFICULTIES),
    )


# ─────────────────────────────────────────────────────────────
# Published catalog
# ─────────────────────────────────────────────────────────────


class CatalogStore:
    """
    Holds the currently published catalog.

    Readers get whatever catalog was last published; a reload builds a new
    catalog first and swaps the reference only once it is complete.
    """

    def __init__(self, source: DatasetSource | None = None, delimiter: str = ","):
        self._source = source
        self._delimiter = delimiter
        self._catalog: Catalog | None = None
        self._lock = threading.Lock()
        # serialises build-and-publish so an older build never lands last
        self._reload_lock = threading.Lock()

    @property
    def source(self) -> DatasetSource:
        if self._source is None:
            self._source = get_dataset_source()
        return self._source

    def publish(self, catalog: Catalog) -> Catalog:
        with self._lock:
            self._catalog = catalog
        logger.info(f"Published catalog with {len(catalog)} exercises")
        return catalog

    def reload(self) -> Catalog:
        """Rebuild from the source. On failure the old catalog stays published."""
        with self._reload_lock:
            catalog = load_catalog(self.source, self._delimiter)
            return self.publish(catalog)

    def current(self) -> Catalog:
        catalog = self._catalog
        if catalog is not None:
            return catalog
        with self._lock:
            if self._catalog is None:
                self._catalog = load_catalog(self.source, self._delimiter)
            return self._catalog
