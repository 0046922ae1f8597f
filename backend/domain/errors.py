"""
Typed failures raised by the persistence layer and the routes.

Each error knows the HTTP status it maps to; `api.errors` turns them into
failure envelopes.
"""


class LibraryError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(LibraryError):
    """A required field is missing or empty."""
    status_code = 403


class ReferentialIntegrityError(ValidationError):
    """A foreign reference does not resolve to an existing record."""
    status_code = 422


class AuthorHasBooksError(ReferentialIntegrityError):
    """An author cannot be deleted while books still reference it."""
    status_code = 409


class NotFoundError(LibraryError):
    status_code = 404


class StorageError(LibraryError):
    """The store was unreachable or rejected the operation."""
    status_code = 500
