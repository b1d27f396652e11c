from .author import Author
from .book import Book, book_author
from .prize import Prize

__all__ = ["Author", "Book", "Prize", "book_author"]
