# Run using uv run python -m scripts.import_exercises [--keep-existing]

import sys

from excatalog.repositories.dataset import get_dataset_source
from excatalog.repositories.exercise import DynamoExerciseRepository
from excatalog.services.catalog import catalog_stats, load_catalog
from excatalog.settings import settings


def import_exercises(repo, source, clear_existing: bool = True) -> int:
    catalog = load_catalog(source, settings.DATASET_DELIMITER)
    print(f"Built catalog with {len(catalog)} exercises from {source!r}")

    if catalog.collisions:
        print(f"{len(catalog.collisions)} duplicate ids (first record kept):")
        for exercise_id in catalog.collisions:
            print("  -", exercise_id)

    if clear_existing:
        deleted = repo.clear_all()
        print(f"Cleared {deleted} existing exercises")

    imported = repo.import_catalog(catalog)
    print(f"Imported {imported} exercises")

    stats = catalog_stats(catalog)
    print("Top muscle groups:")
    top = sorted(stats.by_muscle_group.items(), key=lambda kv: kv[1], reverse=True)
    for muscle, count in top[:5]:
        print(f"  {muscle}: {count} exercises")

    return imported


def main(argv: list[str] | None = None):
    argv = sys.argv[1:] if argv is None else argv
    clear_existing = "--keep-existing" not in argv

    import_exercises(
        DynamoExerciseRepository(),
        get_dataset_source(),
        clear_existing=clear_existing,
    )


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("Import failed:", e)
        raise
