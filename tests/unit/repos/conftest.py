import io

import pytest
from botocore.exceptions import ClientError

# ─────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────


def _client_error(
    op_name: str, *, code: str = "500", message: str | None = None
) -> ClientError:
    """
    Build a botocore ClientError for unit tests.
    """
    msg = message or f"Boom in {op_name}"
    return ClientError(
        error_response={"Error": {"Code": code, "Message": msg}},
        operation_name=op_name,
    )


@pytest.fixture
def client_error():
    """
    Fixture returning a helper function to build ClientError instances.
    Usage:
        err = client_error("GetObject")
    """
    return _client_error


# ─────────────────────────────────────────────────────────────
# Fake DynamoDB Table + batch_writer
# ─────────────────────────────────────────────────────────────


OP_NAMES = {
    "query": "Query",
    "get_item": "GetItem",
    "batch_writer": "BatchWriteItem",
}


class FakeBatchWriter:
    """
    Minimal stand-in for DynamoDB's batch_writer.
    Records put/delete calls on the parent FakeTable.
    """

    def __init__(self, table: "FakeTable"):
        self._table = table

    def __enter__(self) -> "FakeBatchWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        # Don't suppress exceptions
        return False

    def put_item(self, Item: dict) -> None:
        self._table.put_items.append(Item)

    def delete_item(self, Key: dict) -> None:
        self._table.deleted_keys.append(Key)


class FakeTable:
    """
    A lightweight fake for boto3 DynamoDB Table.

    - `response`: dict returned by get_item and (when `pages` is empty) query
    - `pages`: list of query responses returned one per call, for pagination
    - `fail_on`: set of operation names that should raise ClientError
      (e.g. {"query", "batch_writer"})
    """

    def __init__(
        self, response: dict | None = None, *, fail_on: set[str] | None = None
    ):
        self.response: dict = response or {}
        self.pages: list[dict] = []
        self.fail_on: set[str] = set(fail_on or [])

        self.query_calls: list[dict] = []
        self.last_get_kwargs: dict | None = None

        self.put_items: list[dict] = []
        self.deleted_keys: list[dict] = []

    def _maybe_fail(self, op: str):
        name = OP_NAMES[op]
        if op in self.fail_on or name in self.fail_on:
            raise _client_error(name)

    @property
    def last_query_kwargs(self) -> dict | None:
        return self.query_calls[-1] if self.query_calls else None

    def query(self, **kwargs):
        self._maybe_fail("query")
        self.query_calls.append(dict(kwargs))
        if self.pages:
            return self.pages.pop(0)
        return self.response

    def get_item(self, **kwargs):
        self._maybe_fail("get_item")
        self.last_get_kwargs = kwargs
        return self.response

    def batch_writer(self):
        self._maybe_fail("batch_writer")
        return FakeBatchWriter(self)


# ─────────────────────────────────────────────────────────────
# Fake S3 client
# ─────────────────────────────────────────────────────────────


class FakeS3Client:
    def __init__(self, objects: dict[tuple[str, str], bytes] | None = None):
        self.objects = objects or {}
        self.calls: list[dict] = []

    def get_object(self, Bucket: str, Key: str):
        self.calls.append({"Bucket": Bucket, "Key": Key})
        if (Bucket, Key) not in self.objects:
            raise _client_error("GetObject", code="NoSuchKey")
        return {"Body": io.BytesIO(self.objects[(Bucket, Key)])}


# ─────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────


@pytest.fixture
def fake_table() -> FakeTable:
    """
    Fixture returning a FakeTable instance.
    Tests can override the FakeTable.response to simulate DynamoDB responses.
    """
    return FakeTable()


@pytest.fixture
def failing_query_table() -> FakeTable:
    return FakeTable(fail_on={"query"})


@pytest.fixture
def failing_get_table() -> FakeTable:
    return FakeTable(fail_on={"get_item"})


@pytest.fixture
def failing_batch_table() -> FakeTable:
    return FakeTable(fail_on={"batch_writer"})


@pytest.fixture
def fake_s3() -> FakeS3Client:
    return FakeS3Client()
