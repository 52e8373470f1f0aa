"""Download of a single object into a local directory."""

from pathlib import Path
from typing import Union

from botocore.exceptions import BotoCoreError, ClientError

from s3_tools.core import get_logger
from s3_tools.core.exceptions import (
    DestinationNotDirectoryError,
    TransferError,
    ValidationError,
)

from .errors import to_service_error

logger = get_logger(__name__)

CHUNK_SIZE = 1024 * 1024


def local_path_for(dest_dir: Union[str, Path], key: str) -> Path:
    """Map an object key to a path under dest_dir.

    Separators in the key become sub-directories. A leading "/" is ignored.

    Raises:
        ValidationError: If the key is empty, names a directory marker or
            would resolve outside dest_dir
    """
    relative = key.lstrip("/")
    if not relative or relative.endswith("/"):
        raise ValidationError(f"Key does not name a file: '{key}'")

    base = Path(dest_dir)
    target = base / relative
    if base.resolve() not in target.resolve().parents:
        raise ValidationError(f"Key '{key}' resolves outside '{dest_dir}'")
    return target


def download_object(
    client,
    bucket: str,
    key: str,
    dest_dir: Union[str, Path],
    chunk_size: int = CHUNK_SIZE,
) -> Path:
    """Stream one object to ``dest_dir / key``.

    Missing parent directories are created. The body is written chunk by
    chunk; on failure the partially written file is left in place.

    Args:
        client: boto3 S3 client
        bucket: Source bucket
        key: Object key, may contain "/" separators
        dest_dir: Existing local directory to download into
        chunk_size: Bytes read from the response body per write

    Returns:
        Path of the written file

    Raises:
        DestinationNotDirectoryError: If dest_dir is not an existing directory
        ValidationError: If the key cannot be mapped under dest_dir
        StorageServiceError: If the service rejects the request
        TransferError: If reading the body or writing the file fails
    """
    if not bucket:
        raise ValidationError("Bucket name must not be empty")
    if not Path(dest_dir).is_dir():
        logger.error("Download destination is not a directory", dest_dir=str(dest_dir))
        raise DestinationNotDirectoryError(f"Not a directory: {dest_dir}")

    local_path = local_path_for(dest_dir, key)
    logger.info("Downloading object", bucket=bucket, key=key, path=str(local_path))

    try:
        response = client.get_object(Bucket=bucket, Key=key)
    except (ClientError, BotoCoreError) as e:
        error = to_service_error(e, f"Download object '{key}'")
        logger.error(str(error), bucket=bucket, key=key, code=error.code)
        raise error

    body = response["Body"]
    written = 0
    try:
        local_path.parent.mkdir(parents=True, exist_ok=True)
        with open(local_path, "wb") as fh:
            for chunk in body.iter_chunks(chunk_size=chunk_size):
                fh.write(chunk)
                written += len(chunk)
    except (OSError, BotoCoreError) as e:
        error_msg = f"Failed to download '{key}' to '{local_path}': {e}"
        logger.error(error_msg, bucket=bucket, key=key, bytes_written=written)
        raise TransferError(error_msg) from e
    finally:
        body.close()

    logger.info("Object downloaded", bucket=bucket, key=key, bytes_written=written)
    return local_path
