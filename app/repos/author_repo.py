from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.author import Author


class AuthorRepository:
    """Persistence for Author rows; every write commits its own transaction."""

    def __init__(self, db: Session):
        self.db: Session = db

    # Get an author by ID
    def find_by_id(self, author_id: int) -> Author | None:
        return self.db.get(Author, author_id)

    # List authors
    def find_all(self) -> list[Author]:
        stmt = select(Author).order_by(Author.id)
        return list(self.db.scalars(stmt).all())

    # Insert or update an author
    def save(self, author: Author) -> Author:
        try:
            self.db.add(author)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(author)
        return author

    # Delete an author
    def delete(self, author: Author) -> None:
        try:
            self.db.delete(author)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
