"""Object operations: list, delete and metadata lookup."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from s3_tools.core import get_logger
from s3_tools.core.exceptions import ValidationError

from .errors import to_service_error

logger = get_logger(__name__)


@dataclass(frozen=True)
class ObjectInfo:
    """An object listing entry.

    Attributes:
        key: Full object key
        size: Object size in bytes
        last_modified: Last modification time reported by the service
    """

    key: str
    size: int
    last_modified: Optional[datetime] = None


def _require_location(bucket: str, key: Optional[str] = None) -> None:
    if not bucket:
        raise ValidationError("Bucket name must not be empty")
    if key is not None and not key:
        raise ValidationError("Object key must not be empty")


def list_objects(client, bucket: str, prefix: Optional[str] = None) -> list[ObjectInfo]:
    """List every object in a bucket, optionally filtered by key prefix.

    Args:
        client: boto3 S3 client
        bucket: Bucket to list
        prefix: Only return keys starting with this prefix; None or "" lists all

    Returns:
        ObjectInfo entries in the order the service returns them

    Raises:
        StorageServiceError: If the service rejects the request
    """
    _require_location(bucket)
    logger.info("Listing objects", bucket=bucket, prefix=prefix)

    params: Dict[str, Any] = {"Bucket": bucket}
    if prefix:
        params["Prefix"] = prefix

    objects = []
    try:
        # Use paginator to handle buckets with more than one page of keys
        paginator = client.get_paginator("list_objects_v2")
        for page in paginator.paginate(**params):
            for obj in page.get("Contents", []):
                objects.append(
                    ObjectInfo(
                        key=obj["Key"],
                        size=obj.get("Size", 0),
                        last_modified=obj.get("LastModified"),
                    )
                )
    except (ClientError, BotoCoreError) as e:
        error = to_service_error(e, f"List objects in '{bucket}'")
        logger.error(str(error), bucket=bucket, prefix=prefix, code=error.code)
        raise error

    logger.info("Objects listed", bucket=bucket, prefix=prefix, object_count=len(objects))
    return objects


def delete_object(client, bucket: str, key: str) -> None:
    """Delete a single object."""
    _require_location(bucket, key)
    logger.info("Deleting object", bucket=bucket, key=key)

    try:
        client.delete_object(Bucket=bucket, Key=key)
    except (ClientError, BotoCoreError) as e:
        error = to_service_error(e, f"Delete object '{key}'")
        logger.error(str(error), bucket=bucket, key=key, code=error.code)
        raise error

    logger.info("Object deleted", bucket=bucket, key=key)


def head_object(client, bucket: str, key: str) -> Dict[str, Any]:
    """Fetch an object's metadata without its body.

    Returns:
        The HeadObject response with the SDK's ResponseMetadata removed
    """
    _require_location(bucket, key)
    logger.info("Fetching object metadata", bucket=bucket, key=key)

    try:
        response = client.head_object(Bucket=bucket, Key=key)
    except (ClientError, BotoCoreError) as e:
        error = to_service_error(e, f"Head object '{key}'")
        logger.error(str(error), bucket=bucket, key=key, code=error.code)
        raise error

    return {k: v for k, v in response.items() if k != "ResponseMetadata"}
