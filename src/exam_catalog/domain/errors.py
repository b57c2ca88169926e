"""Domain error classes.

Protocol-agnostic errors that represent business failures.
The HTTP entrypoint translates them to status codes; the browsing client
surfaces catalog load failures to the presentation layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message, a stable error code and free-form
    context that protocol adapters can serialize.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - page < 1
        - limit outside 1..200

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Exam with ID not found on lookup
        - Counter increment for an unknown exam

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Exam")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"


# ==============================================================================
# Catalog loading
# ==============================================================================


class CatalogLoadError(DomainError):
    """The catalog could not be established for a browsing session.

    Fatal to session start. Never retried automatically.
    """

    error_code: str = "CATALOG_LOAD_ERROR"


class DataFormatError(CatalogLoadError):
    """Malformed catalog payload (missing or non-list ``exams``, bad JSON, bad entry)."""

    error_code: str = "DATA_FORMAT_ERROR"


class CatalogUnavailableError(CatalogLoadError):
    """The catalog source could not be reached or answered with an error status."""

    error_code: str = "CATALOG_UNAVAILABLE"


class StorageError(DomainError):
    """Key-value or catalog file read/write failure.

    The browsing client degrades to an empty favorites set; the HTTP
    service reports it as a 500.
    """

    error_code: str = "STORAGE_ERROR"


# ==============================================================================
# Upload rejections
# ==============================================================================


class UploadRejectedError(DomainError):
    """Base class for structured upload rejections.

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "UPLOAD_REJECTED"


class FileTypeError(UploadRejectedError):
    """A file's extension is not allowed for its form field."""

    error_code: str = "FILE_TYPE_NOT_ALLOWED"

    def __init__(self, field: str, filename: str, allowed: list[str]) -> None:
        label = "Exam file" if field == "examFile" else "Preview image"
        super().__init__(
            f"Unsupported file type. {label} only supports: {', '.join(allowed)}",
            field=field,
            filename=filename,
            allowed=allowed,
        )


class FileTooLargeError(UploadRejectedError):
    """A single file exceeds the per-file size limit."""

    error_code: str = "FILE_TOO_LARGE"

    def __init__(self, field: str, filename: str, max_bytes: int) -> None:
        super().__init__(
            f"File size exceeds the limit (max {max_bytes // (1024 * 1024)}MB)",
            field=field,
            filename=filename,
            max_bytes=max_bytes,
        )


class TooManyFilesError(UploadRejectedError):
    """The request carries more files than allowed."""

    error_code: str = "TOO_MANY_FILES"

    def __init__(self, field: str, count: int, limit: int) -> None:
        super().__init__(
            f"Too many files uploaded ({count} > {limit})",
            field=field,
            count=count,
            limit=limit,
        )


class MissingFileError(UploadRejectedError):
    """The primary exam document is absent."""

    error_code: str = "MISSING_FILE"

    def __init__(self, field: str = "examFile") -> None:
        super().__init__("Please upload an exam file", field=field)
