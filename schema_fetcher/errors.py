"""Exceptions raised while fetching a schema.

Every error is fatal for the CLI: ``cli.main`` catches ``FetchError``, prints
its message to stderr and exits with status 1.
"""


class FetchError(Exception):
    """Base class for all schema fetch failures."""


class UsageError(FetchError):
    """A required option was missing or empty."""


class ConfigurationError(FetchError):
    """The provider name is not one of the known providers."""


class DestinationError(FetchError):
    """The output directory or file could not be created."""


class TransportError(FetchError):
    """The request failed before a response was received."""


class HTTPStatusError(FetchError):
    """The server answered with a status other than 200."""

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"bad status: {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.reason = reason


class TransferError(FetchError):
    """Reading the response body or writing the output file failed mid-copy."""
