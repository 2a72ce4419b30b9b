from dotenv import find_dotenv, load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(find_dotenv(), override=False)


class Settings(BaseSettings):
    PROJECT_NAME: str = "excatalog"
    REGION: str = "eu-west-2"
    ENV: str = "dev"
    DDB_TABLE_NAME: str = "excatalog-dev-table"
    model_config = SettingsConfigDict(env_file=None)

    # ──────────────────── Dataset ─────────────────────

    DATASET_PATH: str = "data/muscle_exercises.csv"
    DATASET_DELIMITER: str = Field(default=",", min_length=1, max_length=1)

    # When a bucket is set the dataset is read from S3 instead of disk
    DATASET_S3_BUCKET: str | None = None
    DATASET_S3_KEY: str = "muscle_exercises.csv"

    # ──────────────────── Matching ─────────────────────

    MATCH_THRESHOLD: float = Field(default=0.7, ge=0.0, le=1.0)

    # Appended after the built-in annotation patterns, applied case-insensitively
    EXTRA_ANNOTATION_PATTERNS: tuple[str, ...] = ()

    # ──────────────────── Persistence ─────────────────────

    CATALOG_PK: str = "CATALOG"


settings = Settings()
