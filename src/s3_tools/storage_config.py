"""Storage endpoint configuration loaded from a TOML file and the environment.

Sources, highest precedence first:

1. Explicit values passed to :meth:`StorageSettings.load` (CLI options)
2. Environment variables prefixed with ``S3_TOOLS_``
3. The TOML configuration file (``config.toml`` by default, optional)

Example ``config.toml``::

    endpoint_url = "http://localhost:9000"
    region = "us-east-1"
    access_key = "minioadmin"
    secret_key = "minioadmin"
    path_style = true
"""

import tomllib
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from s3_tools.core import get_logger
from s3_tools.core.exceptions import PathNotFoundError, ValidationError
from s3_tools.objectstorage.clients import S3ClientConfig

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = "config.toml"


class StorageSettings(BaseSettings):
    """Immutable connection settings for the storage endpoint."""

    model_config = SettingsConfigDict(
        env_prefix="S3_TOOLS_",
        case_sensitive=False,
        toml_file=DEFAULT_CONFIG_FILE,
        frozen=True,
        extra="ignore",
    )

    endpoint_url: Optional[str] = Field(None, description="S3-compatible endpoint URL")
    region: str = Field("us-east-1", description="Region name")
    access_key: Optional[str] = Field(None, description="Access key ID")
    secret_key: Optional[str] = Field(None, description="Secret access key")
    session_token: Optional[str] = Field(None, description="Session token")
    aws_profile: Optional[str] = Field(None, description="AWS CLI profile name")
    path_style: bool = Field(False, description="Use path-style addressing")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, TomlConfigSettingsSource(settings_cls))

    @classmethod
    def load(
        cls,
        config_file: Optional[Union[str, Path]] = None,
        **overrides: Any,
    ) -> "StorageSettings":
        """Load settings, reading ``config_file`` instead of the default file.

        Overrides whose value is ``None`` are ignored so unset CLI options
        fall through to the environment and the file. Only the default file
        is optional; an explicitly named file must exist.

        Raises:
            PathNotFoundError: If config_file is given but is not a file
            ValidationError: If the configuration file cannot be read or parsed
            pydantic.ValidationError: If a setting has an invalid value
        """
        settings_cls: type[StorageSettings] = cls
        if config_file is not None:
            if not Path(config_file).is_file():
                logger.error("Configuration file not found", config_file=str(config_file))
                raise PathNotFoundError(f"Configuration file not found: {config_file}")

            class FileStorageSettings(cls):  # type: ignore[valid-type,misc]
                model_config = SettingsConfigDict(toml_file=config_file)

            settings_cls = FileStorageSettings

        explicit = {k: v for k, v in overrides.items() if v is not None}
        try:
            loaded = settings_cls(**explicit)
        except (tomllib.TOMLDecodeError, OSError) as e:
            source = config_file or DEFAULT_CONFIG_FILE
            error_msg = f"Invalid configuration file '{source}': {e}"
            logger.error(error_msg)
            raise ValidationError(error_msg) from e
        logger.debug(
            "Storage settings loaded",
            config_file=str(config_file or DEFAULT_CONFIG_FILE),
            endpoint_url=loaded.endpoint_url,
            region=loaded.region,
            path_style=loaded.path_style,
        )
        return loaded

    def to_client_config(self) -> S3ClientConfig:
        """Build the client configuration for these settings."""
        return S3ClientConfig(
            access_key_id=self.access_key,
            secret_access_key=self.secret_key,
            session_token=self.session_token,
            region_name=self.region,
            endpoint_url=self.endpoint_url,
            aws_profile=self.aws_profile,
            path_style=self.path_style,
        )
