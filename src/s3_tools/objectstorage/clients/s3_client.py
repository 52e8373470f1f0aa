"""S3 client configuration and management.

This module provides S3 client configuration and management functionality
with support for multiple authentication methods and S3-compatible services.

The S3ClientManager handles the complexity of boto3 client creation with
different credential sources and addressing styles.

Authentication Methods Supported:
    1. Explicit credentials (access_key_id, secret_access_key)
    2. AWS CLI profiles (aws_profile)
    3. IAM roles / environment variables (no explicit credentials)
    4. Temporary credentials (session_token)

S3-Compatible Services:
    Supports custom endpoints for services like MinIO, Ceph RGW and other
    S3-compatible object storage providers via endpoint_url. Most of these
    need path-style addressing (path_style=True), where the bucket name goes
    in the URL path instead of the host name.
"""

from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from pydantic import BaseModel, ConfigDict, Field

from s3_tools.core import get_logger

logger = get_logger(__name__)


class S3ClientConfig(BaseModel):
    """Configuration for S3 client connections.

    Authentication Priority:
        1. If explicit credentials are provided, use them
        2. If aws_profile is provided, use profile-based authentication
        3. Otherwise, fall back to default AWS credential chain

    Example:
        # MinIO endpoint
        config = S3ClientConfig(
            endpoint_url="http://localhost:9000",
            access_key_id="minioadmin",
            secret_access_key="minioadmin",
            path_style=True,
        )
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    access_key_id: Optional[str] = Field(None, description="AWS access key ID")
    secret_access_key: Optional[str] = Field(None, description="AWS secret access key")
    session_token: Optional[str] = Field(
        None, description="AWS session token for temporary credentials"
    )
    region_name: str = Field("us-east-1", description="AWS region name")
    endpoint_url: Optional[str] = Field(
        None, description="Custom S3 endpoint URL for S3-compatible services"
    )
    aws_profile: Optional[str] = Field(
        None, description="AWS CLI profile name to use for credentials"
    )
    path_style: bool = Field(False, description="Use path-style bucket addressing")


class S3ClientManager:
    """Manages S3 client connections."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 client manager.

        Args:
            config: S3 client configuration
        """
        self.config = config
        self._client = None
        logger.info(
            "S3 client manager initialized",
            region=config.region_name,
            endpoint_url=config.endpoint_url,
        )

    @property
    def client(self):
        """Get or create S3 client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create boto3 S3 client with the configured settings."""
        kwargs: Dict[str, Any] = {
            "region_name": self.config.region_name,
        }

        if self.config.endpoint_url:
            kwargs["endpoint_url"] = self.config.endpoint_url

        if self.config.path_style:
            kwargs["config"] = Config(s3={"addressing_style": "path"})

        if self.config.access_key_id and self.config.secret_access_key:
            kwargs.update(
                {
                    "aws_access_key_id": self.config.access_key_id,
                    "aws_secret_access_key": self.config.secret_access_key,
                }
            )
            if self.config.session_token:
                kwargs["aws_session_token"] = self.config.session_token
            client = boto3.client("s3", **kwargs)  # type: ignore
            logger.info("S3 client created with explicit credentials")
        elif self.config.aws_profile:
            session = boto3.Session(profile_name=self.config.aws_profile)
            client = session.client("s3", **kwargs)  # type: ignore
            logger.info(
                "S3 client created with profile", profile=self.config.aws_profile
            )
        else:
            client = boto3.client("s3", **kwargs)  # type: ignore
            logger.info("S3 client created with default credential chain")

        return client
