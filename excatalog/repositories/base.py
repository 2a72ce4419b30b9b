from typing import Generic, List, TypeVar

from botocore.exceptions import ClientError

from excatalog.repositories.errors import RepoError
from excatalog.utils.log import logger

T = TypeVar("T")


class DynamoRepository(Generic[T]):
    """
    Base class for DynamoDB repositories with common query/error handling.
    """

    def __init__(self, table=None):
        from excatalog.utils import db

        self._table = table or db.get_table()

    def _to_model(self, item: dict) -> T:
        """This should be overridden in subclasses"""
        raise NotImplementedError

    def _safe_query(self, **kwargs) -> List[dict]:
        """Execute query, following pagination, and handle ClientError"""
        items: List[dict] = []
        try:
            while True:
                response = self._table.query(**kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    return items
                kwargs["ExclusiveStartKey"] = last_key
        except ClientError as e:
            logger.exception("DynamoDB query failed")
            raise RepoError("Failed to query database") from e

    def _safe_get(self, **kwargs) -> dict | None:
        try:
            resp = self._table.get_item(**kwargs)
            return resp.get("Item")
        except ClientError as e:
            logger.exception("DynamoDB get_item failed")
            raise RepoError("Failed to read from database") from e

    def _safe_batch_put(self, items: List[dict]) -> None:
        try:
            with self._table.batch_writer() as batch:
                for item in items:
                    batch.put_item(Item=item)
        except ClientError as e:
            logger.exception("DynamoDB batch put failed")
            raise RepoError("Failed to write to database") from e

    def _safe_batch_delete(self, keys: List[dict]) -> None:
        try:
            with self._table.batch_writer() as batch:
                for key in keys:
                    batch.delete_item(Key=key)
        except ClientError as e:
            logger.exception("DynamoDB batch delete failed")
            raise RepoError("Failed to delete from database") from e
