"""Bucket operations: list, create and delete."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from s3_tools.core import get_logger
from s3_tools.core.exceptions import ValidationError

from .errors import to_service_error

logger = get_logger(__name__)

# Buckets in this region must be created without a location constraint
DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class BucketInfo:
    """A bucket as reported by the storage service.

    Attributes:
        name: Bucket name
        creation_date: When the bucket was created, if the service reports it
    """

    name: str
    creation_date: Optional[datetime] = None


def _require_bucket(bucket: str) -> None:
    if not bucket:
        raise ValidationError("Bucket name must not be empty")


def list_buckets(client) -> list[BucketInfo]:
    """List all buckets visible to the configured credentials."""
    logger.info("Listing buckets")

    try:
        response = client.list_buckets()
    except (ClientError, BotoCoreError) as e:
        error = to_service_error(e, "List buckets")
        logger.error(str(error), code=error.code)
        raise error

    buckets = [
        BucketInfo(name=item["Name"], creation_date=item.get("CreationDate"))
        for item in response.get("Buckets", [])
    ]
    logger.info("Buckets listed", bucket_count=len(buckets))
    return buckets


def create_bucket(client, bucket: str, region: Optional[str] = None) -> None:
    """Create a bucket.

    Args:
        client: boto3 S3 client
        bucket: Name of the bucket to create
        region: Region to constrain the bucket to; omitted for us-east-1

    Raises:
        ValidationError: If the bucket name is empty
        StorageServiceError: If the service rejects the request
    """
    _require_bucket(bucket)
    logger.info("Creating bucket", bucket=bucket, region=region)

    kwargs = {"Bucket": bucket}
    if region and region != DEFAULT_REGION:
        kwargs["CreateBucketConfiguration"] = {"LocationConstraint": region}

    try:
        client.create_bucket(**kwargs)
    except (ClientError, BotoCoreError) as e:
        error = to_service_error(e, f"Create bucket '{bucket}'")
        logger.error(str(error), bucket=bucket, code=error.code)
        raise error

    logger.info("Bucket created", bucket=bucket)


def delete_bucket(client, bucket: str) -> None:
    """Delete an empty bucket.

    Raises:
        ValidationError: If the bucket name is empty
        StorageServiceError: If the service rejects the request
    """
    _require_bucket(bucket)
    logger.info("Deleting bucket", bucket=bucket)

    try:
        client.delete_bucket(Bucket=bucket)
    except (ClientError, BotoCoreError) as e:
        error = to_service_error(e, f"Delete bucket '{bucket}'")
        logger.error(str(error), bucket=bucket, code=error.code)
        raise error

    logger.info("Bucket deleted", bucket=bucket)
