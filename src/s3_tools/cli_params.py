"""Shared CLI parameter definitions.

Each function returns the typer.Option used for one global connection
setting, so help text and flag names are defined once. Every option
defaults to None, meaning "not given": the value then comes from the
environment or the configuration file.

Usage:
    @app.callback()
    def main(
        endpoint_url: Annotated[Optional[str], endpoint_url_option()] = None,
    ):
        pass
"""

from typing import Annotated, Optional

import typer


def config_file_option() -> Annotated[Optional[str], typer.Option]:
    """Configuration file option."""
    return typer.Option(
        "--config",
        "-c",
        help="TOML configuration file (default: ./config.toml, optional)",
    )


def endpoint_url_option() -> Annotated[Optional[str], typer.Option]:
    """Endpoint URL option."""
    return typer.Option("--endpoint-url", help="S3-compatible endpoint URL")


def region_option() -> Annotated[Optional[str], typer.Option]:
    """Region option."""
    return typer.Option("--region", help="Region name")


def access_key_option() -> Annotated[Optional[str], typer.Option]:
    """Access key option."""
    return typer.Option("--access-key", help="Access key ID")


def secret_key_option() -> Annotated[Optional[str], typer.Option]:
    """Secret key option."""
    return typer.Option("--secret-key", help="Secret access key")


def session_token_option() -> Annotated[Optional[str], typer.Option]:
    """Session token option."""
    return typer.Option("--session-token", help="Session token for temporary credentials")


def aws_profile_option() -> Annotated[Optional[str], typer.Option]:
    """AWS profile option."""
    return typer.Option("--aws-profile", help="AWS CLI profile name")


def path_style_option() -> Annotated[Optional[bool], typer.Option]:
    """Addressing style option."""
    return typer.Option(
        "--path-style/--virtual-style",
        help="Put the bucket name in the URL path instead of the host name",
    )
