from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from botocore.exceptions import ClientError


class PageWindowError(Exception):
    """Base exception for all pagewindow errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ContractViolationError(PageWindowError):
    """
    Raised when a caller breaks the contract of the core.

    Covers a non-positive page size, a negative selector capacity and
    feeding a window that has already been finalized. Values are never
    clamped into range.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.field = field
        self.value = value


class SourceError(PageWindowError):
    """Raised when the upstream entry source fails mid-stream."""


class TableNotFoundError(SourceError):
    """Raised when the DynamoDB table backing a source does not exist."""

    def __init__(self, table_name: str, original_error: Exception | None = None) -> None:
        super().__init__(f"Table '{table_name}' not found", original_error)
        self.table_name = table_name


class ThrottlingError(SourceError):
    """Raised when DynamoDB throttles the scan feeding a window."""

    def __init__(
        self, message: str = "Request rate exceeded", original_error: Exception | None = None
    ) -> None:
        super().__init__(message, original_error)


class RequestTimeoutError(SourceError):
    """Raised when a request to DynamoDB times out."""

    def __init__(
        self, message: str = "Request timed out", original_error: Exception | None = None
    ) -> None:
        super().__init__(message, original_error)


class EntrySerializationError(SourceError):
    """Raised when a source record cannot be turned into an Entry (e.g. missing key)."""

    def __init__(
        self,
        message: str,
        attribute: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.attribute = attribute


@contextmanager
def handle_source_errors(table_name: str | None = None) -> Generator[None, None, None]:
    """
    Context manager that catches botocore.exceptions.ClientError
    and raises the appropriate SourceError subclass.

    Args:
        table_name: Optional table name for better error messages

    Usage:
        with handle_source_errors(table_name="users"):
            for page in paginator.paginate(TableName="users"):
                ...
    """
    try:
        yield
    except ClientError as e:
        error_code = e.response.get("Error", {}).get("Code", "Unknown")
        error_message = e.response.get("Error", {}).get("Message", str(e))

        if error_code == "ResourceNotFoundException":
            raise TableNotFoundError(table_name=table_name or "unknown", original_error=e) from e

        if error_code in (
            "ProvisionedThroughputExceededException",
            "ThrottlingException",
            "RequestLimitExceeded",
        ):
            raise ThrottlingError(message=error_message, original_error=e) from e

        if error_code in ("RequestTimeout", "RequestTimeoutException"):
            raise RequestTimeoutError(message=error_message, original_error=e) from e

        # Unknown error: wrap in generic SourceError
        raise SourceError(
            message=f"DynamoDB error ({error_code}): {error_message}", original_error=e
        ) from e
