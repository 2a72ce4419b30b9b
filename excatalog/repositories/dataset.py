from pathlib import Path
from typing import Protocol

from botocore.exceptions import BotoCoreError, ClientError

from excatalog.repositories.errors import DatasetReadError
from excatalog.settings import settings
from excatalog.utils.log import logger


class DatasetSource(Protocol):
    def read_text(self) -> str: ...


class FileDatasetSource:
    """
    Reads the exercise dataset from a local file.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8-sig"):
        self.path = Path(path)
        self.encoding = encoding

    def read_text(self) -> str:
        try:
            return self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.exception(f"Failed to read dataset file {self.path}")
            raise DatasetReadError(f"Failed to read dataset file {self.path}") from e

    def __repr__(self) -> str:
        return f"FileDatasetSource({str(self.path)!r})"


class S3DatasetSource:
    """
    Reads the exercise dataset from an S3 object.
    """

    def __init__(
        self, bucket: str, key: str, client=None, encoding: str = "utf-8-sig"
    ):
        from excatalog.utils import db

        self.bucket = bucket
        self.key = key
        self.encoding = encoding
        self._client = client or db.get_s3_client()

    def read_text(self) -> str:
        try:
            response = self._client.get_object(Bucket=self.bucket, Key=self.key)
            return response["Body"].read().decode(self.encoding)
        except (ClientError, BotoCoreError, UnicodeDecodeError) as e:
            logger.exception(f"Failed to read dataset s3://{self.bucket}/{self.key}")
            raise DatasetReadError(
                f"Failed to read dataset s3://{self.bucket}/{self.key}"
            ) from e

    def __repr__(self) -> str:
        return f"S3DatasetSource('s3://{self.bucket}/{self.key}')"


def get_dataset_source() -> DatasetSource:
    """Pick the dataset source from settings"""
    if settings.DATASET_S3_BUCKET:
        return S3DatasetSource(settings.DATASET_S3_BUCKET, settings.DATASET_S3_KEY)
    return FileDatasetSource(settings.DATASET_PATH)
