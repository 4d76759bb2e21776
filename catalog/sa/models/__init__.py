from .base import Base, TimestampMixin
from .author import Author
from .book import Book, BookAuthor

__all__ = [
    'Base',
    'TimestampMixin',
    'Author',
    'Book',
    'BookAuthor'
]
