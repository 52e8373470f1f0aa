"""Translation of SDK failures into s3-tools exceptions."""

from botocore.exceptions import BotoCoreError, ClientError

from s3_tools.core.exceptions import StorageServiceError


def to_service_error(error: Exception, action: str) -> StorageServiceError:
    """Convert a botocore failure into a StorageServiceError.

    Args:
        error: The exception raised by the SDK
        action: Short description of the failed request, used in the message

    Returns:
        StorageServiceError with the provider code, message and HTTP status
    """
    if isinstance(error, ClientError):
        details = error.response.get("Error", {})
        metadata = error.response.get("ResponseMetadata", {})
        return StorageServiceError(
            details.get("Message") or str(error),
            code=str(details.get("Code") or "Unknown"),
            status_code=metadata.get("HTTPStatusCode"),
            action=action,
        )

    if isinstance(error, BotoCoreError):
        return StorageServiceError(str(error), code="ClientFailure", action=action)

    return StorageServiceError(str(error), action=action)
