from .database import Database
from .models import Base, Book, Author, BookAuthor

__all__ = [
    'Database',
    'Base',
    'Book',
    'Author',
    'BookAuthor'
]
