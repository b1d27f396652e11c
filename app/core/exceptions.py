class ErrorMessage:
    """Messages carried by the bookstore domain errors."""

    AUTHOR_NOT_FOUND = "The author with the given id was not found"
    AUTHOR_REQUIRED = "The author data is required"
    BIRTH_DATE_REQUIRED = "The birth date of the author is required"
    BIRTH_DATE_IN_FUTURE = "The birth date cannot be after the current date"
    AUTHOR_HAS_BOOKS = "Unable to delete the author because it has associated books"
    AUTHOR_HAS_PRIZES = "Unable to delete the author because it has associated prizes"


class BookstoreError(Exception):
    """Base class for business errors raised by the services."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message: str = message


class EntityNotFoundError(BookstoreError):
    """The requested identifier does not exist."""


class IllegalOperationError(BookstoreError):
    """The operation violates a business rule."""
