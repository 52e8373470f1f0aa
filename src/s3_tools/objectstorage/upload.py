"""Upload of a local file or directory tree to a bucket.

A single file becomes one object keyed ``prefix + file name``. A directory is
walked with an explicit stack of ``(directory, prefix)`` pairs: every
sub-directory extends the prefix with ``<name>/`` and every file is uploaded
under the prefix of the directory holding it. The root directory's own name
is not part of any key, so uploading ``root/{a.txt, sub/b.txt}`` with prefix
``x/`` produces ``x/a.txt`` and ``x/sub/b.txt``.

Uploads run one at a time. The walk is not transactional: the first failure
stops it and objects uploaded before that stay in the bucket.
"""

import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from botocore.exceptions import BotoCoreError, ClientError

from s3_tools.core import get_logger
from s3_tools.core.exceptions import PathNotFoundError, TransferError, ValidationError

from .errors import to_service_error

logger = get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class UploadTarget:
    """A local path and where it should land in the object store."""

    local_path: Path
    bucket: str
    prefix: str = ""


def guess_content_type(path: Union[str, Path]) -> str:
    """Guess a content type from a file name, defaulting to binary."""
    content_type, _ = mimetypes.guess_type(str(path))
    return content_type or DEFAULT_CONTENT_TYPE


def upload_file(client, bucket: str, key: str, path: Union[str, Path]) -> None:
    """Upload one local file as one object, streaming it from disk.

    Raises:
        TransferError: If the local file cannot be read
        StorageServiceError: If the service rejects the request
    """
    content_type = guess_content_type(path)
    logger.info(
        "Uploading file", bucket=bucket, key=key, path=str(path), content_type=content_type
    )

    try:
        with open(path, "rb") as body:
            client.put_object(
                Bucket=bucket, Key=key, Body=body, ContentType=content_type
            )
    except OSError as e:
        error_msg = f"Failed to read '{path}': {e}"
        logger.error(error_msg, bucket=bucket, key=key)
        raise TransferError(error_msg) from e
    except (ClientError, BotoCoreError) as e:
        error = to_service_error(e, f"Upload '{path}' to '{key}'")
        logger.error(str(error), bucket=bucket, key=key, code=error.code)
        raise error

    logger.info("File uploaded", bucket=bucket, key=key)


def _walk_directory(client, target: UploadTarget) -> list[str]:
    uploaded = []
    pending = [(target.local_path, target.prefix)]

    while pending:
        directory, prefix = pending.pop()
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            error_msg = f"Failed to read directory '{directory}': {e}"
            logger.error(error_msg, bucket=target.bucket)
            raise TransferError(error_msg) from e

        subdirectories = []
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                subdirectories.append((Path(entry.path), f"{prefix}{entry.name}/"))
            elif entry.is_file():
                key = f"{prefix}{entry.name}"
                upload_file(client, target.bucket, key, entry.path)
                uploaded.append(key)
            else:
                logger.debug("Skipping entry", path=entry.path)

        # Reversed so sub-directories are visited in name order
        pending.extend(reversed(subdirectories))

    return uploaded


def upload_path(
    client, bucket: str, prefix: str, local_path: Union[str, Path]
) -> list[str]:
    """Upload a file or every file under a directory.

    Args:
        client: boto3 S3 client
        bucket: Destination bucket
        prefix: Destination key prefix, may be empty
        local_path: File or directory to upload

    Returns:
        Keys of the uploaded objects, in upload order

    Raises:
        ValidationError: If the bucket is empty or the path is not a file or directory
        PathNotFoundError: If local_path does not exist
        TransferError: If a local file or directory cannot be read
        StorageServiceError: If the service rejects an upload
    """
    if not bucket:
        raise ValidationError("Bucket name must not be empty")

    target = UploadTarget(local_path=Path(local_path), bucket=bucket, prefix=prefix or "")
    if not target.local_path.exists():
        logger.error("Upload path not found", path=str(target.local_path))
        raise PathNotFoundError(f"Path not found: {target.local_path}")

    logger.info(
        "Starting upload",
        bucket=bucket,
        prefix=target.prefix,
        path=str(target.local_path),
    )

    if target.local_path.is_file():
        key = f"{target.prefix}{target.local_path.name}"
        upload_file(client, bucket, key, target.local_path)
        uploaded = [key]
    elif target.local_path.is_dir():
        uploaded = _walk_directory(client, target)
    else:
        raise ValidationError(
            f"Path is neither a file nor a directory: {target.local_path}"
        )

    logger.info("Upload completed", bucket=bucket, object_count=len(uploaded))
    return uploaded
