import boto3

from excatalog.settings import settings

REGION_NAME = settings.REGION
TABLE_NAME = settings.DDB_TABLE_NAME


def get_dynamo_resource():
    return boto3.resource("dynamodb", region_name=REGION_NAME)


def get_table():
    resource = get_dynamo_resource()
    return resource.Table(TABLE_NAME)  # type: ignore


def get_s3_client():
    return boto3.client("s3", region_name=REGION_NAME)


def build_catalog_pk() -> str:
    """
    Partition key shared by every catalog item.
    Example: CATALOG
    """
    return settings.CATALOG_PK


def build_exercise_sk(exercise_id: str) -> str:
    """
    Sort key for an exercise item.
    Example: EXERCISE#biceps-barbell-curl
    """
    return f"EXERCISE#{exercise_id}"
