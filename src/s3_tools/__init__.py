"""Command-line tools for S3-compatible object storage.

This package lists, creates and deletes buckets, and lists, uploads,
downloads, deletes and inspects objects on any S3-compatible endpoint
(AWS S3, MinIO, Ceph RGW, ...). All wire-protocol and signing work is done
by boto3.

Key Features:
    - Bucket and object operations as CLI commands
    - Recursive directory upload preserving relative paths in keys
    - Streaming download into a local directory tree
    - Configuration from CLI options, environment and a TOML file

Library Usage:

    >>> from s3_tools import StorageSettings, S3ClientManager, upload_path
    >>> settings = StorageSettings.load("config.toml")
    >>> client = S3ClientManager(settings.to_client_config()).client
    >>> upload_path(client, "my-bucket", "backups/", "./data")
"""

__version__ = "0.1.0"

from .objectstorage import (
    BucketInfo,
    ObjectInfo,
    S3ClientConfig,
    S3ClientManager,
    create_bucket,
    delete_bucket,
    delete_object,
    download_object,
    head_object,
    list_buckets,
    list_objects,
    upload_path,
)
from .storage_config import StorageSettings

__all__ = [
    # Configuration
    "S3ClientConfig",
    "S3ClientManager",
    "StorageSettings",
    # Bucket operations
    "BucketInfo",
    "create_bucket",
    "delete_bucket",
    "list_buckets",
    # Object operations
    "ObjectInfo",
    "delete_object",
    "download_object",
    "head_object",
    "list_objects",
    "upload_path",
]
