"""Test configuration and fixtures for s3-tools."""

import boto3
import pytest
from moto import mock_aws

TEST_BUCKET = "test-bucket"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep real credentials and config files out of the tests."""
    for name in (
        "S3_TOOLS_ENDPOINT_URL",
        "S3_TOOLS_REGION",
        "S3_TOOLS_ACCESS_KEY",
        "S3_TOOLS_SECRET_KEY",
        "S3_TOOLS_SESSION_TOKEN",
        "S3_TOOLS_AWS_PROFILE",
        "S3_TOOLS_PATH_STYLE",
        "AWS_PROFILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def sample_file_structure(temp_dir):
    """Create a sample file structure for upload tests."""
    root = temp_dir / "root"
    root.mkdir()
    (root / "file1.txt").write_text("content1")
    (root / "file2.txt").write_text("content2" * 100)

    # Create subdirectory with files
    subdir = root / "subdir"
    subdir.mkdir()
    (subdir / "file3.txt").write_text("content3" * 50)

    nested = subdir / "nested"
    nested.mkdir()
    (nested / "image.png").write_bytes(b"\x89PNG\r\n")

    return root


@pytest.fixture
def s3_client():
    """Mocked S3 client with an empty test bucket."""
    with mock_aws():
        client = boto3.client(
            "s3",
            aws_access_key_id="testing",
            aws_secret_access_key="testing",
            region_name="us-east-1",
        )
        client.create_bucket(Bucket=TEST_BUCKET)
        yield client


@pytest.fixture
def bucket_keys(s3_client):
    """Return a function listing every key in a bucket, sorted."""

    def keys(bucket=TEST_BUCKET):
        response = s3_client.list_objects_v2(Bucket=bucket)
        return sorted(obj["Key"] for obj in response.get("Contents", []))

    return keys
