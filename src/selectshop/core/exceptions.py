"""Domain errors raised by the core services.

Every error carries an :class:`ErrorKind`. The HTTP boundary translates the
kind into a status code through a single table, so services never deal with
transport concerns.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    INVALID_ARGUMENT = "invalid_argument"
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not_found"
    STORAGE_FAILURE = "storage_failure"


class SelectShopError(Exception):
    """Base class for errors raised by SelectShop services."""

    kind: ErrorKind = ErrorKind.STORAGE_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(SelectShopError):
    """Malformed or empty input."""

    kind = ErrorKind.INVALID_ARGUMENT


class UnauthenticatedError(SelectShopError):
    """Credentials did not identify a user."""

    kind = ErrorKind.UNAUTHENTICATED


class NotFoundError(SelectShopError):
    """A referenced folder or product is missing or owned by someone else."""

    kind = ErrorKind.NOT_FOUND


class StorageFailureError(SelectShopError):
    """The persistence layer rejected or failed an operation."""

    kind = ErrorKind.STORAGE_FAILURE
