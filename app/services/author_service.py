from __future__ import annotations
import datetime

from app.core.exceptions import EntityNotFoundError, ErrorMessage, IllegalOperationError
from app.core.logging import get_logger
from app.models.author import Author
from app.repos.author_repo import AuthorRepository

logger = get_logger(__name__)


def _as_date(value: datetime.date) -> datetime.date:
    # datetime is a date subclass but does not compare with plain dates
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


class AuthorService:
    """Business rules for authors on top of an AuthorRepository."""

    def __init__(self, repository: AuthorRepository):
        self.repository: AuthorRepository = repository

    # Create author
    def create_author(self, author: Author | None) -> Author:
        """
        Validate and persist a new author.

        Raises IllegalOperationError when the author or its birth date is
        missing, or when the birth date is after today.
        """
        if author is None:
            raise IllegalOperationError(ErrorMessage.AUTHOR_REQUIRED)
        if author.birth_date is None:
            logger.warning("Rejected author without birth date")
            raise IllegalOperationError(ErrorMessage.BIRTH_DATE_REQUIRED)

        birth_date = _as_date(author.birth_date)
        if birth_date > datetime.date.today():
            logger.warning("Rejected author born in the future (%s)", birth_date)
            raise IllegalOperationError(ErrorMessage.BIRTH_DATE_IN_FUTURE)

        author.birth_date = birth_date
        created = self.repository.save(author)
        logger.info("Author %s created", created.id)
        return created

    # List authors
    def get_authors(self) -> list[Author]:
        return self.repository.find_all()

    # Get author by id
    def get_author(self, author_id: int) -> Author:
        author = self.repository.find_by_id(author_id)
        if author is None:
            raise EntityNotFoundError(ErrorMessage.AUTHOR_NOT_FOUND)
        return author

    # Update author
    def update_author(self, author_id: int, author: Author | None) -> Author:
        """
        Overwrite name, birth date and description of an existing author.

        The birth date is not checked against the current date here, unlike
        create_author.
        """
        stored = self.get_author(author_id)
        if author is None:
            raise IllegalOperationError(ErrorMessage.AUTHOR_REQUIRED)

        stored.name = author.name
        stored.birth_date = _as_date(author.birth_date) if author.birth_date else stored.birth_date
        stored.description = author.description

        updated = self.repository.save(stored)
        logger.info("Author %s updated", updated.id)
        return updated

    # Delete author
    def delete_author(self, author_id: int) -> None:
        author = self.get_author(author_id)

        if author.books:
            logger.warning("Refused to delete author %s with books", author_id)
            raise IllegalOperationError(ErrorMessage.AUTHOR_HAS_BOOKS)
        if author.prizes:
            logger.warning("Refused to delete author %s with prizes", author_id)
            raise IllegalOperationError(ErrorMessage.AUTHOR_HAS_PRIZES)

        self.repository.delete(author)
        logger.info("Author %s deleted", author_id)
