from typing import List, Protocol

from boto3.dynamodb.conditions import Key

from excatalog.models.catalog import Catalog
from excatalog.models.exercise import CatalogRecord
from excatalog.repositories.base import DynamoRepository
from excatalog.repositories.errors import ExerciseRepoError, RepoError
from excatalog.utils import dates, db
from excatalog.utils.log import logger


class ExerciseRepository(Protocol):
    def import_catalog(self, catalog: Catalog) -> int: ...
    def get_exercise_by_id(self, exercise_id: str) -> CatalogRecord | None: ...
    def clear_all(self) -> int: ...


class DynamoExerciseRepository(DynamoRepository[CatalogRecord]):
    """
    Stores a published catalog in DynamoDB, one item per exercise
    under a shared catalog partition.
    """

    def _to_model(self, item: dict) -> CatalogRecord:
        """
        Map a DynamoDB item (from the resource API) into a CatalogRecord.
        """
        try:
            return CatalogRecord.from_ddb_item(item)
        except Exception as e:
            logger.error(f"_to_model failed: {e}")
            raise ExerciseRepoError("Failed to create exercise model from item") from e

    def import_catalog(self, catalog: Catalog) -> int:
        """
        Write every record of the catalog. Colliding ids are written once,
        the first record wins as it does in the in-memory index.
        """
        pk = db.build_catalog_pk()
        imported_at = dates.now()

        items = []
        for exercise_id in catalog.ids:
            record = catalog.get(exercise_id)
            if record is not None:
                items.append(record.to_ddb_item(pk, imported_at))

        try:
            self._safe_batch_put(items)
        except RepoError as e:
            raise ExerciseRepoError("Failed to import catalog") from e

        logger.info(f"Imported {len(items)} exercises into {pk}")
        return len(items)

    def get_exercise_by_id(self, exercise_id: str) -> CatalogRecord | None:
        """
        Return a single exercise by its id
        """
        pk = db.build_catalog_pk()
        sk = db.build_exercise_sk(exercise_id)

        try:
            item = self._safe_get(Key={"PK": pk, "SK": sk})
        except RepoError as e:
            raise ExerciseRepoError("Failed to get exercise by id") from e

        if not item:
            return None

        return self._to_model(item)

    def clear_all(self) -> int:
        """
        Delete every exercise item in the catalog partition.
        """
        pk = db.build_catalog_pk()

        try:
            items = self._safe_query(
                KeyConditionExpression=Key("PK").eq(pk)
                & Key("SK").begins_with("EXERCISE#")
            )
            self._safe_batch_delete(
                [{"PK": item["PK"], "SK": item["SK"]} for item in items]
            )
        except RepoError as e:
            raise ExerciseRepoError("Failed to clear exercises") from e

        logger.info(f"Deleted {len(items)} exercises from {pk}")
        return len(items)
