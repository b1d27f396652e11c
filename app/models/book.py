from __future__ import annotations
import datetime
from typing import TYPE_CHECKING
from sqlalchemy import Column, Date, ForeignKey, Integer, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base

if TYPE_CHECKING:
    from app.models.author import Author

#Book <-> Author
book_author = Table(
    "book_author",
    Base.metadata,
    Column("book_id", Integer, ForeignKey("books.id", ondelete="RESTRICT"), primary_key=True),
    Column("author_id", Integer, ForeignKey("authors.id", ondelete="RESTRICT"), primary_key=True),
)


#Book
class Book(Base):
    __tablename__: str = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    isbn: Mapped[str | None] = mapped_column(Text, unique=True, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    publishing_date: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)

    authors: Mapped[list[Author]] = relationship(
        secondary=book_author,
        back_populates="books",
        lazy="selectin",
    )
