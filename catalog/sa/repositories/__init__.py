from .book import BookRepository
from .author import AuthorRepository
from .book_author import BookAuthorRepository

__all__ = ['BookRepository', 'AuthorRepository', 'BookAuthorRepository']
