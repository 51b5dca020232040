"""Exceptions raised by urikit.

Every exception carries the data needed to build a precise diagnostic
(offending string, offset, prefix or path) in addition to its message.
"""

from typing import Any


class UriKitError(Exception):
    """Base exception for all urikit errors."""

    def __init__(
        self,
        error_code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize urikit error.

        Args:
            error_code: One of: unsupported_configuration, not_found,
                        unknown_namespace_prefix, syntax_error
            message: Human-readable error description
            details: Optional additional context
        """
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.details = details or {}

    def to_error_response(self) -> dict[str, str]:
        """Convert to a serializable error response.

        Returns:
            Error dict with status, error_code, and message fields
        """
        return {
            "status": "error",
            "error_code": self.error_code,
            "message": self.message,
        }


class UnsupportedConfiguration(UriKitError):
    """Raised when a factory is configured in a way it cannot honor."""

    def __init__(self, directory_separator: str, message: str) -> None:
        super().__init__(
            "unsupported_configuration",
            message,
            {"directory_separator": directory_separator},
        )
        self.directory_separator = directory_separator


class FileNotFound(UriKitError, FileNotFoundError):
    """Raised when a path cannot be canonicalized because it does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__("not_found", f'File "{path}" not found', {"path": path})
        self.path = path


class UnknownNamespacePrefix(UriKitError, LookupError):
    """Raised when a CURIE prefix cannot be mapped to a namespace name."""

    def __init__(
        self,
        prefix: str,
        in_data: str,
        document_uri: str | None = None,
        line: int | None = None,
    ) -> None:
        message = f'Unknown namespace prefix "{prefix}"'
        if document_uri is not None:
            message += f" in {document_uri}"
            if line is not None:
                message += f":{line}"
        elif line is not None:
            message += f" at line {line}"

        super().__init__(
            "unknown_namespace_prefix",
            message,
            {
                "prefix": prefix,
                "in_data": in_data,
                "document_uri": document_uri,
                "line": line,
            },
        )
        self.prefix = prefix
        self.in_data = in_data
        self.document_uri = document_uri
        self.line = line


class CurieSyntaxError(UriKitError, ValueError):
    """Raised for malformed safe CURIEs."""

    # Number of characters quoted from the offending position
    EXCERPT_LENGTH = 10

    def __init__(self, in_data: str, at_offset: int, extra_message: str) -> None:
        excerpt = in_data[at_offset : at_offset + self.EXCERPT_LENGTH]
        super().__init__(
            "syntax_error",
            f'Syntax error in "{in_data}" at offset {at_offset} '
            f'("{excerpt}"); {extra_message}',
            {
                "in_data": in_data,
                "at_offset": at_offset,
                "extra_message": extra_message,
            },
        )
        self.in_data = in_data
        self.at_offset = at_offset
        self.extra_message = extra_message
