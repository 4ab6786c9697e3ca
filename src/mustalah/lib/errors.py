"""Custom exception hierarchy for Mustalah index generation and lookups.

Validation problems found in term files are not exceptions; they are returned
as ``ValidationIssue`` records. The classes below cover failures that stop an
operation: unreadable directories, unwritable artifacts, bad configuration and
repository access errors.
"""


class MustalahError(Exception):
    """Base exception for all Mustalah errors.

    All Mustalah-specific exceptions inherit from this class, enabling
    centralized exception handling in the CLI.
    """

    pass


class ConfigError(MustalahError):
    """Exception raised for configuration errors.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class DirectoryReadError(MustalahError):
    """Exception raised when a data directory cannot be listed.

    Attributes:
        path: Directory that could not be read
        reason: Message of the underlying failure
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize DirectoryReadError with path and reason.

        Args:
            path: Directory that could not be read
            reason: Message of the underlying OS error
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read directory {path}: {reason}")


class IndexWriteError(MustalahError):
    """Exception raised when a generated index cannot be written to disk."""

    def __init__(self, path: str, reason: str) -> None:
        """Create a write error for an index artifact."""
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write index to {path}: {reason}")


class RepositoryError(MustalahError):
    """Base exception for term repository lookups.

    Raised by repository adapters when a published index or term file
    cannot be retrieved or decoded.
    """

    pass


class RepositoryConnectionError(RepositoryError):
    """Error raised when the remote repository host is unreachable.

    Attributes:
        base_url: The base URL that failed
    """

    def __init__(self, base_url: str, original_error: Exception | None = None) -> None:
        """Initialize RepositoryConnectionError with URL and optional cause.

        Args:
            base_url: The base URL that could not be reached
            original_error: The underlying exception that caused the failure
        """
        self.base_url = base_url
        message = f"Failed to connect to term repository at {base_url}."
        if original_error:
            message += f"\nOriginal error: {original_error}"
        super().__init__(message)


class RepositoryAPIError(RepositoryError):
    """Error raised when the repository host answers with a non-2xx status.

    Attributes:
        url: Requested URL
        status_code: HTTP status code returned
        detail: Reason phrase or body excerpt, if any
    """

    def __init__(self, url: str, status_code: int, detail: str | None = None) -> None:
        """Initialize RepositoryAPIError with request details."""
        self.url = url
        self.status_code = status_code
        self.detail = detail
        message = f"Request to {url} failed with status {status_code}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ResourceNotFoundError(RepositoryError):
    """Error raised when an index or term does not exist in the repository."""

    def __init__(self, resource: str) -> None:
        """Create a not-found error for the given resource description."""
        self.resource = resource
        super().__init__(f"Not found: {resource}")
