"""Tests for console formatting."""

from datetime import datetime, timedelta, timezone

import pytest

from s3_tools.display import (
    bucket_lines,
    format_size,
    format_timestamp,
    metadata_lines,
    object_lines,
)
from s3_tools.objectstorage import BucketInfo, ObjectInfo


class TestFormatSize:
    """Test human-readable sizes."""

    @pytest.mark.parametrize(
        "num_bytes, expected",
        [
            (0, "0.00 B"),
            (1023, "1023.00 B"),
            (1024, "1.00 KB"),
            (1536, "1.50 KB"),
            (1048576, "1.00 MB"),
            (1024**3, "1.00 GB"),
            (5 * 1024**4, "5.00 TB"),
        ],
    )
    def test_format_size(self, num_bytes, expected):
        assert format_size(num_bytes) == expected

    def test_largest_unit_caps(self):
        """Test sizes beyond yottabytes stay in the largest unit."""
        assert format_size(1024**9) == "1024.00 YB"


class TestFormatTimestamp:
    """Test timestamp rendering."""

    def test_utc(self):
        value = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-05-01T12:00:00Z"

    def test_converted_to_utc(self):
        value = datetime(2024, 5, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "2024-05-01T12:00:00Z"

    def test_naive_treated_as_utc(self):
        assert format_timestamp(datetime(2024, 5, 1)) == "2024-05-01T00:00:00Z"

    def test_missing(self):
        assert format_timestamp(None) == "Unknown"


class TestTables:
    """Test table rendering."""

    def test_bucket_lines(self):
        created = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        lines = bucket_lines([BucketInfo("photos", created), BucketInfo("logs")])

        assert len(lines) == 3
        assert lines[1].startswith("photos")
        assert lines[1].endswith("2024-01-02T03:04:05Z")
        assert lines[2].endswith("Unknown")

    def test_object_lines(self):
        modified = datetime(2024, 1, 2, tzinfo=timezone.utc)
        lines = object_lines([ObjectInfo("docs/a.txt", 2048, modified)])

        assert len(lines) == 2
        key, size, when = (part.strip() for part in lines[1].split("|"))
        assert (key, size, when) == ("docs/a.txt", "2.00 KB", "2024-01-02T00:00:00Z")

    def test_metadata_lines_sorted(self):
        lines = metadata_lines(
            {
                "ContentType": "text/plain",
                "ContentLength": 5,
                "LastModified": datetime(2024, 1, 2, tzinfo=timezone.utc),
            }
        )

        assert lines == [
            "ContentLength: 5",
            "ContentType: text/plain",
            "LastModified: 2024-01-02T00:00:00Z",
        ]
