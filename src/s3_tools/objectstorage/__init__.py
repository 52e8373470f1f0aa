"""Object storage operations for S3-compatible services."""

from .buckets import BucketInfo, create_bucket, delete_bucket, list_buckets
from .clients import S3ClientConfig, S3ClientManager
from .download import download_object
from .objects import ObjectInfo, delete_object, head_object, list_objects
from .upload import UploadTarget, upload_file, upload_path

__all__ = [
    "BucketInfo",
    "ObjectInfo",
    "S3ClientConfig",
    "S3ClientManager",
    "UploadTarget",
    "create_bucket",
    "delete_bucket",
    "delete_object",
    "download_object",
    "head_object",
    "list_buckets",
    "list_objects",
    "upload_file",
    "upload_path",
]
