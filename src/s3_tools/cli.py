"""Command-line interface for s3-tools.

Commands:
    - list-buckets: List buckets with their creation time
    - create-bucket / delete-bucket: Manage buckets
    - list-objects: List objects, optionally under a prefix
    - put-object / upload-object: Upload a file or a directory tree
    - download-object: Download one object into a local directory
    - delete-object: Delete one object
    - head-object: Show an object's metadata

Connection settings come from the global options, then S3_TOOLS_* environment
variables, then the TOML configuration file.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Annotated, Any, Optional

import pydantic
import typer
from botocore.exceptions import BotoCoreError

from . import __version__
from .cli_params import (
    access_key_option,
    aws_profile_option,
    config_file_option,
    endpoint_url_option,
    path_style_option,
    region_option,
    secret_key_option,
    session_token_option,
)
from .commands import (
    Command,
    CreateBucket,
    DeleteBucket,
    DeleteObject,
    DownloadObject,
    HeadObject,
    ListBuckets,
    ListObjects,
    UploadObject,
    dispatch,
    exit_code,
    render,
    tolerated,
)
from .core import S3ToolsError, get_logger
from .objectstorage import S3ClientManager
from .results import OperationFailure
from .storage_config import StorageSettings

logger = get_logger(__name__)

app = typer.Typer(
    name="s3-tools",
    help="Basic bucket and object operations for S3-compatible storage.",
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Global options collected by the app callback."""

    config_file: Optional[str] = None
    overrides: dict[str, Any] = field(default_factory=dict)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[Optional[str], config_file_option()] = None,
    endpoint_url: Annotated[Optional[str], endpoint_url_option()] = None,
    region: Annotated[Optional[str], region_option()] = None,
    access_key: Annotated[Optional[str], access_key_option()] = None,
    secret_key: Annotated[Optional[str], secret_key_option()] = None,
    session_token: Annotated[Optional[str], session_token_option()] = None,
    aws_profile: Annotated[Optional[str], aws_profile_option()] = None,
    path_style: Annotated[Optional[bool], path_style_option()] = None,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    S3-Tools: bucket and object operations for S3-compatible storage.
    """
    ctx.obj = CliState(
        config_file=config_file,
        overrides={
            "endpoint_url": endpoint_url,
            "region": region,
            "access_key": access_key,
            "secret_key": secret_key,
            "session_token": session_token,
            "aws_profile": aws_profile,
            "path_style": path_style,
        },
    )


def _load_settings(ctx: typer.Context) -> StorageSettings:
    state = ctx.obj if isinstance(ctx.obj, CliState) else CliState()
    try:
        return StorageSettings.load(state.config_file, **state.overrides)
    except S3ToolsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except pydantic.ValidationError as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(1)


def _run(ctx: typer.Context, command: Command) -> None:
    """Build a client, dispatch the command and print its result."""
    settings = _load_settings(ctx)

    try:
        client = S3ClientManager(settings.to_client_config()).client
    except (BotoCoreError, ValueError) as e:
        typer.echo(f"Error: failed to create storage client: {e}", err=True)
        raise typer.Exit(1)

    if isinstance(command, CreateBucket) and command.region is None:
        command = replace(command, region=settings.region)

    result = dispatch(command, client)

    for line in render(command, result):
        typer.echo(line)
    if isinstance(result, OperationFailure) and not tolerated(command, result):
        typer.echo(f"Error: {result.detail}", err=True)

    code = exit_code(command, result)
    if code:
        raise typer.Exit(code)


@app.command("list-buckets")
def list_buckets_cmd(ctx: typer.Context) -> None:
    """List buckets with their creation time."""
    _run(ctx, ListBuckets())


@app.command("create-bucket")
def create_bucket_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Name of the bucket to create")],
) -> None:
    """Create a bucket in the configured region."""
    _run(ctx, CreateBucket(bucket=bucket))


@app.command("delete-bucket")
def delete_bucket_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Name of the bucket to delete")],
    tolerate_errors: Annotated[
        bool,
        typer.Option(
            "--tolerate-errors",
            help="Print the service error and exit 0 if the delete fails",
        ),
    ] = False,
) -> None:
    """
    Delete an empty bucket.

    Examples:
        s3-tools delete-bucket old-bucket
        s3-tools delete-bucket maybe-missing --tolerate-errors
    """
    _run(ctx, DeleteBucket(bucket=bucket, tolerate_errors=tolerate_errors))


@app.command("list-objects")
def list_objects_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Bucket to list")],
    prefix: Annotated[
        Optional[str],
        typer.Option("--prefix", "-p", help="Only list keys starting with this prefix"),
    ] = None,
) -> None:
    """List objects with size and last-modified time."""
    _run(ctx, ListObjects(bucket=bucket, prefix=prefix))


@app.command("upload-object")
@app.command("put-object")
def upload_object_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Destination bucket")],
    path: Annotated[Path, typer.Argument(help="Local file or directory to upload")],
    prefix: Annotated[
        str,
        typer.Option("--prefix", help="Destination key prefix, e.g. 'backups/'"),
    ] = "",
) -> None:
    """
    Upload a file, or every file under a directory.

    A file is stored as PREFIX + file name. For a directory, the path of each
    file relative to it is appended to PREFIX.

    Examples:
        s3-tools put-object my-bucket ./report.pdf --prefix docs/
        s3-tools upload-object my-bucket ./site --prefix www/
    """
    _run(ctx, UploadObject(bucket=bucket, prefix=prefix, path=path))


@app.command("delete-object")
def delete_object_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Bucket holding the object")],
    key: Annotated[str, typer.Argument(help="Key of the object to delete")],
) -> None:
    """Delete one object."""
    _run(ctx, DeleteObject(bucket=bucket, key=key))


@app.command("download-object")
def download_object_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Bucket holding the object")],
    key: Annotated[str, typer.Argument(help="Key of the object to download")],
    dest_dir: Annotated[
        Path, typer.Argument(help="Existing directory to download into")
    ],
) -> None:
    """
    Download one object to DEST_DIR/KEY.

    Directories named in the key are created under DEST_DIR.
    """
    _run(ctx, DownloadObject(bucket=bucket, key=key, dest_dir=dest_dir))


@app.command("head-object")
def head_object_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Bucket holding the object")],
    key: Annotated[str, typer.Argument(help="Key of the object")],
) -> None:
    """Show an object's metadata."""
    _run(ctx, HeadObject(bucket=bucket, key=key))


if __name__ == "__main__":
    app()
