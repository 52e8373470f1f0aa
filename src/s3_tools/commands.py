"""Typed command values and the dispatcher that runs them.

Each command maps to exactly one operation in :mod:`s3_tools.objectstorage`.
``dispatch`` runs it against a client inside a tracing span and returns a
tagged result; ``render`` and ``exit_code`` decide what the CLI prints and
how the process ends.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, Optional, Union

from s3_tools.core import get_logger, get_tracer
from s3_tools.core.exceptions import ErrorCategory, S3ToolsError
from s3_tools.display import bucket_lines, metadata_lines, object_lines
from s3_tools.objectstorage import (
    create_bucket,
    delete_bucket,
    delete_object,
    download_object,
    head_object,
    list_buckets,
    list_objects,
    upload_path,
)
from s3_tools.results import OperationFailure, OperationResult, OperationSuccess

logger = get_logger(__name__)
tracer = get_tracer(__name__)


@dataclass(frozen=True)
class ListBuckets:
    name: ClassVar[str] = "list-buckets"


@dataclass(frozen=True)
class CreateBucket:
    name: ClassVar[str] = "create-bucket"
    bucket: str
    region: Optional[str] = None


@dataclass(frozen=True)
class DeleteBucket:
    """Delete a bucket.

    With tolerate_errors the provider's error is reported but the command
    still exits successfully.
    """

    name: ClassVar[str] = "delete-bucket"
    bucket: str
    tolerate_errors: bool = False


@dataclass(frozen=True)
class ListObjects:
    name: ClassVar[str] = "list-objects"
    bucket: str
    prefix: Optional[str] = None


@dataclass(frozen=True)
class UploadObject:
    name: ClassVar[str] = "upload-object"
    bucket: str
    prefix: str
    path: Path


@dataclass(frozen=True)
class DeleteObject:
    name: ClassVar[str] = "delete-object"
    bucket: str
    key: str


@dataclass(frozen=True)
class DownloadObject:
    name: ClassVar[str] = "download-object"
    bucket: str
    key: str
    dest_dir: Path


@dataclass(frozen=True)
class HeadObject:
    name: ClassVar[str] = "head-object"
    bucket: str
    key: str


Command = Union[
    ListBuckets,
    CreateBucket,
    DeleteBucket,
    ListObjects,
    UploadObject,
    DeleteObject,
    DownloadObject,
    HeadObject,
]


def _execute(command: Command, client) -> Any:
    if isinstance(command, ListBuckets):
        return list_buckets(client)
    elif isinstance(command, CreateBucket):
        return create_bucket(client, command.bucket, region=command.region)
    elif isinstance(command, DeleteBucket):
        return delete_bucket(client, command.bucket)
    elif isinstance(command, ListObjects):
        return list_objects(client, command.bucket, prefix=command.prefix)
    elif isinstance(command, UploadObject):
        return upload_path(client, command.bucket, command.prefix, command.path)
    elif isinstance(command, DeleteObject):
        return delete_object(client, command.bucket, command.key)
    elif isinstance(command, DownloadObject):
        return download_object(client, command.bucket, command.key, command.dest_dir)
    elif isinstance(command, HeadObject):
        return head_object(client, command.bucket, command.key)
    else:
        raise TypeError(f"Unknown command: {command!r}")


def dispatch(command: Command, client) -> OperationResult:
    """Run one command against the client and capture its outcome."""
    with tracer.start_as_current_span(command.name) as span:
        try:
            value = _execute(command, client)
        except S3ToolsError as e:
            logger.warning("Command failed", command=command.name, code=e.code)
            span.set_attribute("s3_tools.error_code", e.code)
            return OperationFailure.from_error(e)

    logger.info("Command completed", command=command.name)
    return OperationSuccess(value)


def tolerated(command: Command, result: OperationResult) -> bool:
    """Whether a failure is reported but does not fail the process.

    Only service errors from a delete-bucket run with ``tolerate_errors``
    qualify; bad input and local I/O failures always fail.
    """
    return (
        isinstance(result, OperationFailure)
        and result.category == ErrorCategory.service
        and isinstance(command, DeleteBucket)
        and command.tolerate_errors
    )


def render(command: Command, result: OperationResult) -> list[str]:
    """Lines to print on stdout for a result.

    Failures render nothing here except a tolerated delete-bucket failure,
    which reports the provider's code and message.
    """
    if isinstance(result, OperationFailure):
        if tolerated(command, result):
            return [f"Delete failed: {result.code} {result.message}"]
        return []

    value = result.value
    if isinstance(command, ListBuckets):
        return bucket_lines(value)
    elif isinstance(command, CreateBucket):
        return [f"Bucket '{command.bucket}' created successfully"]
    elif isinstance(command, DeleteBucket):
        return [f"Bucket '{command.bucket}' deleted successfully"]
    elif isinstance(command, ListObjects):
        return object_lines(value)
    elif isinstance(command, UploadObject):
        lines = [f"Uploaded s3://{command.bucket}/{key}" for key in value]
        lines.append(f"{len(value)} object(s) uploaded to bucket '{command.bucket}'")
        return lines
    elif isinstance(command, DeleteObject):
        return [
            f"Object '{command.key}' deleted successfully "
            f"from bucket '{command.bucket}'"
        ]
    elif isinstance(command, DownloadObject):
        return [f"Object '{command.key}' downloaded successfully to '{value}'"]
    elif isinstance(command, HeadObject):
        return metadata_lines(value)
    return []


def exit_code(command: Command, result: OperationResult) -> int:
    """Process exit code for a result."""
    if isinstance(result, OperationSuccess):
        return 0
    if tolerated(command, result):
        return 0
    return 1
