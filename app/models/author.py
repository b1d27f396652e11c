from __future__ import annotations
import datetime
from typing import TYPE_CHECKING
from sqlalchemy import Date, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base

if TYPE_CHECKING:
    from app.models.book import Book
    from app.models.prize import Prize


#Author
class Author(Base):
    __tablename__: str = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    birth_date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Eager loading: delete checks read these collections in memory
    books: Mapped[list[Book]] = relationship(
        secondary="book_author",
        back_populates="authors",
        lazy="selectin",
    )
    prizes: Mapped[list[Prize]] = relationship(
        back_populates="author",
        lazy="selectin",
    )
