"""Exception hierarchy for s3-tools."""

from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    """Broad classes of failure a command can end with."""

    local_precondition = "local_precondition"
    service = "service"
    transfer_io = "transfer_io"


class S3ToolsError(Exception):
    """Base exception for all s3-tools errors."""

    category = ErrorCategory.local_precondition
    code = "S3ToolsError"


class ValidationError(S3ToolsError):
    """Raised when validation fails."""

    code = "ValidationError"


class PathNotFoundError(S3ToolsError):
    """Raised when a local path is not found."""

    code = "PathNotFound"


class DestinationNotDirectoryError(ValidationError):
    """Raised when a download destination is not an existing directory."""

    code = "NotADirectory"


class TransferError(S3ToolsError):
    """Raised when local I/O fails while streaming an object."""

    category = ErrorCategory.transfer_io
    code = "TransferError"


class StorageServiceError(S3ToolsError):
    """Raised when the storage service rejects a request.

    Carries the provider's error code and message so callers never need to
    look at SDK exception types.
    """

    category = ErrorCategory.service

    def __init__(
        self,
        message: str,
        code: str = "ServiceError",
        status_code: Optional[int] = None,
        action: Optional[str] = None,
    ):
        super().__init__(f"{action} failed: {code} {message}" if action else message)
        self.message = message
        self.code = code
        self.status_code = status_code
