"""Console formatting for command results."""

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional

from s3_tools.objectstorage import BucketInfo, ObjectInfo

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]


def format_size(num_bytes: float) -> str:
    """Format a byte count on a base-1024 scale with two decimals.

    >>> format_size(0)
    '0.00 B'
    >>> format_size(1536)
    '1.50 KB'
    """
    size = float(num_bytes)
    index = 0
    while size >= 1024 and index < len(SIZE_UNITS) - 1:
        size /= 1024
        index += 1
    return f"{size:.2f} {SIZE_UNITS[index]}"


def format_timestamp(value: Optional[datetime]) -> str:
    """Render a timestamp as RFC 3339 in UTC, e.g. 2024-05-01T12:00:00Z."""
    if value is None:
        return "Unknown"
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def bucket_lines(buckets: Iterable[BucketInfo]) -> list[str]:
    lines = [f"{'Bucket':<30}  Created"]
    for bucket in buckets:
        lines.append(f"{bucket.name:<30}  {format_timestamp(bucket.creation_date)}")
    return lines


def object_lines(objects: Iterable[ObjectInfo]) -> list[str]:
    lines = [f"{'Key':<50} | {'Size':<10} | Last modified"]
    for obj in objects:
        lines.append(
            f"{obj.key:<50} | {format_size(obj.size):<10} | "
            f"{format_timestamp(obj.last_modified)}"
        )
    return lines


def metadata_lines(metadata: Mapping[str, Any]) -> list[str]:
    lines = []
    for field in sorted(metadata):
        value = metadata[field]
        if isinstance(value, datetime):
            value = format_timestamp(value)
        lines.append(f"{field}: {value}")
    return lines
