"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from s3_tools import __version__
from s3_tools.cli import app

TEST_BUCKET = "test-bucket"

runner = CliRunner()


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("S3_TOOLS_ACCESS_KEY", "testing")
    monkeypatch.setenv("S3_TOOLS_SECRET_KEY", "testing")
    monkeypatch.setenv("S3_TOOLS_REGION", "us-east-1")


class TestGlobalOptions:
    """Test options shared by all commands."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_configuration(self, monkeypatch):
        monkeypatch.setenv("S3_TOOLS_PATH_STYLE", "sometimes")

        result = runner.invoke(app, ["list-buckets"])

        assert result.exit_code == 1
        assert "invalid configuration" in result.output

    def test_malformed_configuration_file(self, temp_dir):
        (temp_dir / "config.toml").write_text("region = \n")

        result = runner.invoke(app, ["list-buckets"])

        assert result.exit_code == 1
        assert "Invalid configuration file" in result.output
        assert "Traceback" not in result.output

    def test_missing_configuration_file(self, temp_dir):
        missing = temp_dir / "typo.toml"

        result = runner.invoke(app, ["--config", str(missing), "list-buckets"])

        assert result.exit_code == 1
        assert "Configuration file not found" in result.output

    def test_path_style_option(self, s3_client, credentials):
        result = runner.invoke(app, ["--path-style", "list-buckets"])

        assert result.exit_code == 0
        assert TEST_BUCKET in result.output


class TestBucketCommands:
    """Test bucket commands against mocked S3."""

    def test_list_buckets(self, s3_client, credentials):
        result = runner.invoke(app, ["list-buckets"])

        assert result.exit_code == 0
        assert TEST_BUCKET in result.output

    def test_create_bucket(self, s3_client, credentials):
        result = runner.invoke(app, ["create-bucket", "fresh"])

        assert result.exit_code == 0
        assert "Bucket 'fresh' created successfully" in result.output
        assert "fresh" in {b["Name"] for b in s3_client.list_buckets()["Buckets"]}

    def test_delete_bucket(self, s3_client, credentials):
        result = runner.invoke(app, ["delete-bucket", TEST_BUCKET])

        assert result.exit_code == 0
        assert s3_client.list_buckets()["Buckets"] == []

    def test_delete_missing_bucket_fails(self, s3_client, credentials):
        result = runner.invoke(app, ["delete-bucket", "no-such-bucket"])

        assert result.exit_code == 1
        assert "NoSuchBucket" in result.output

    def test_delete_missing_bucket_tolerated(self, s3_client, credentials):
        result = runner.invoke(
            app, ["delete-bucket", "no-such-bucket", "--tolerate-errors"]
        )

        assert result.exit_code == 0
        assert "Delete failed: NoSuchBucket" in result.output

    def test_tolerate_errors_does_not_hide_bad_input(self, s3_client, credentials):
        result = runner.invoke(app, ["delete-bucket", "", "--tolerate-errors"])

        assert result.exit_code == 1
        assert "Delete failed" not in result.output
        assert "Bucket name must not be empty" in result.output


class TestObjectCommands:
    """Test object commands against mocked S3."""

    @pytest.mark.parametrize("command", ["put-object", "upload-object"])
    def test_upload_directory(self, s3_client, bucket_keys, credentials, temp_dir, command):
        root = temp_dir / "root"
        (root / "sub").mkdir(parents=True)
        (root / "a.txt").write_text("a")
        (root / "sub" / "b.txt").write_text("b")

        result = runner.invoke(app, [command, TEST_BUCKET, str(root), "--prefix", "x/"])

        assert result.exit_code == 0
        assert bucket_keys() == ["x/a.txt", "x/sub/b.txt"]
        assert "2 object(s) uploaded" in result.output

    def test_upload_missing_path(self, s3_client, bucket_keys, credentials, temp_dir):
        result = runner.invoke(app, ["put-object", TEST_BUCKET, str(temp_dir / "nope")])

        assert result.exit_code == 1
        assert "Path not found" in result.output
        assert bucket_keys() == []

    def test_list_objects(self, s3_client, credentials):
        s3_client.put_object(Bucket=TEST_BUCKET, Key="docs/a.txt", Body=b"x" * 2048)
        s3_client.put_object(Bucket=TEST_BUCKET, Key="img/b.png", Body=b"y")

        result = runner.invoke(app, ["list-objects", TEST_BUCKET])

        assert result.exit_code == 0
        assert "docs/a.txt" in result.output
        assert "2.00 KB" in result.output
        assert "img/b.png" in result.output

    def test_list_objects_with_prefix(self, s3_client, credentials):
        s3_client.put_object(Bucket=TEST_BUCKET, Key="docs/a.txt", Body=b"x")
        s3_client.put_object(Bucket=TEST_BUCKET, Key="img/b.png", Body=b"y")

        result = runner.invoke(app, ["list-objects", TEST_BUCKET, "--prefix", "docs/"])

        assert result.exit_code == 0
        assert "docs/a.txt" in result.output
        assert "img/b.png" not in result.output

    def test_download_object(self, s3_client, credentials, temp_dir):
        s3_client.put_object(Bucket=TEST_BUCKET, Key="a/b/c.txt", Body=b"nested")
        dest = temp_dir / "dest"
        dest.mkdir()

        result = runner.invoke(
            app, ["download-object", TEST_BUCKET, "a/b/c.txt", str(dest)]
        )

        assert result.exit_code == 0
        assert (dest / "a" / "b" / "c.txt").read_bytes() == b"nested"

    def test_download_into_missing_directory(self, s3_client, credentials, temp_dir):
        s3_client.put_object(Bucket=TEST_BUCKET, Key="a.txt", Body=b"a")

        result = runner.invoke(
            app, ["download-object", TEST_BUCKET, "a.txt", str(temp_dir / "missing")]
        )

        assert result.exit_code == 1
        assert "Not a directory" in result.output

    def test_head_object(self, s3_client, credentials):
        s3_client.put_object(
            Bucket=TEST_BUCKET, Key="a.txt", Body=b"hello", ContentType="text/plain"
        )

        result = runner.invoke(app, ["head-object", TEST_BUCKET, "a.txt"])

        assert result.exit_code == 0
        assert "ContentLength: 5" in result.output
        assert "ContentType: text/plain" in result.output

    def test_delete_object(self, s3_client, bucket_keys, credentials):
        s3_client.put_object(Bucket=TEST_BUCKET, Key="a.txt", Body=b"a")

        result = runner.invoke(app, ["delete-object", TEST_BUCKET, "a.txt"])

        assert result.exit_code == 0
        assert bucket_keys() == []
