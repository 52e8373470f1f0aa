"""Tagged results returned by the command dispatcher.

Operations raise s3-tools exceptions; the dispatcher turns the outcome into
either an OperationSuccess carrying the payload or an OperationFailure
carrying the error category, code and message. Callers branch on ``kind``
and never see SDK exception types.
"""

from dataclasses import dataclass
from typing import Any, Generic, Literal, Optional, TypeVar, Union

from s3_tools.core.exceptions import ErrorCategory, S3ToolsError, StorageServiceError

T = TypeVar("T")


@dataclass(frozen=True)
class OperationSuccess(Generic[T]):
    """A command that completed; value is the operation's payload."""

    value: T
    kind: Literal["success"] = "success"


@dataclass(frozen=True)
class OperationFailure:
    """A command that failed.

    Attributes:
        category: Local precondition, remote service or transfer I/O
        code: Provider error code for service errors, otherwise the s3-tools code
        message: Provider message for service errors, otherwise the error text
        detail: Full error text including the failed action
        status_code: HTTP status for service errors, if known
    """

    category: ErrorCategory
    code: str
    message: str
    detail: str
    status_code: Optional[int] = None
    kind: Literal["failure"] = "failure"

    @classmethod
    def from_error(cls, error: S3ToolsError) -> "OperationFailure":
        if isinstance(error, StorageServiceError):
            return cls(
                category=error.category,
                code=error.code,
                message=error.message,
                detail=str(error),
                status_code=error.status_code,
            )
        return cls(
            category=error.category,
            code=error.code,
            message=str(error),
            detail=str(error),
        )


OperationResult = Union[OperationSuccess[Any], OperationFailure]
