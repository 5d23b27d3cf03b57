"""Custom exceptions for geniuskit."""

from typing import Any


class GeniusKitError(Exception):
    """Base exception for geniuskit.

    Attributes:
        message: Human-readable error message
        context: Additional context information
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidArgumentError(GeniusKitError):
    """An argument does not have the expected type.

    Attributes:
        argument: Name of the offending parameter
        expected: Name of the expected type
        received: Name of the type that was passed
    """

    def __init__(self, argument: str, expected: str, received: str) -> None:
        super().__init__(
            f"Expected {argument!r} to be of type {expected}, got {received}",
            argument=argument,
            expected=expected,
            received=received,
        )
        self.argument = argument
        self.expected = expected
        self.received = received


class AccessDeniedError(GeniusKitError):
    """Genius refused to serve the page (HTTP 403).

    Attributes:
        url: The page that was requested
        status_code: HTTP status code returned
    """

    def __init__(self, url: str, status_code: int = 403) -> None:
        super().__init__(
            "Access denied by Genius. Try using an API key.",
            url=url,
            status_code=status_code,
        )
        self.url = url
        self.status_code = status_code


class NoResultError(GeniusKitError):
    """The page was fetched but no lyrics could be extracted.

    Attributes:
        url: The page that was requested
        containers: Number of lyrics containers found on the page
    """

    def __init__(self, url: str | None = None, containers: int = 0) -> None:
        super().__init__("No result was received", url=url, containers=containers)
        self.url = url
        self.containers = containers


class RequiresGeniusKeyError(GeniusKitError):
    """The operation needs a Genius API access token."""

    def __init__(self, message: str = "This action requires a valid Genius API key") -> None:
        super().__init__(message)


class GeniusAPIError(GeniusKitError):
    """Error from Genius API.

    Attributes:
        status_code: HTTP status code if available
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        **context: Any,
    ) -> None:
        super().__init__(message, status_code=status_code, **context)
        self.status_code = status_code


class NotFoundError(GeniusAPIError):
    """Requested song or artist does not exist."""
