from typing import List
from sqlalchemy.orm import Session
from ..models import Author, Book, BookAuthor
from catalog.exceptions import ConstraintViolation

class BookAuthorRepository:
    """Authorship links between books and authors"""

    def __init__(self, session: Session):
        self.session = session

    def exists(self, author_id: int, book_id: int) -> bool:
        return self.session.get(BookAuthor, (author_id, book_id)) is not None

    def insert(self, author_id: int, book_id: int) -> BookAuthor:
        """Link an author to a book.

        Raises:
            ConstraintViolation: If the pair is already linked or either end is missing
        """
        if self.session.get(Author, author_id) is None:
            raise ConstraintViolation(f"Author {author_id} does not exist")
        if self.session.get(Book, book_id) is None:
            raise ConstraintViolation(f"Book {book_id} does not exist")
        if self.exists(author_id, book_id):
            raise ConstraintViolation(f"Author {author_id} is already linked to book {book_id}")

        link = BookAuthor(author_id=author_id, book_id=book_id)
        self.session.add(link)
        self.session.flush()
        return link

    def delete_for_book(self, book_id: int) -> int:
        """Remove every link to a book; returns the number removed"""
        removed = (
            self.session.query(BookAuthor)
            .filter(BookAuthor.book_id == book_id)
            .delete(synchronize_session="fetch")
        )
        self.session.flush()
        return removed

    def delete_for_author(self, author_id: int) -> int:
        """Remove every link to an author; returns the number removed"""
        removed = (
            self.session.query(BookAuthor)
            .filter(BookAuthor.author_id == author_id)
            .delete(synchronize_session="fetch")
        )
        self.session.flush()
        return removed

    def list_all(self) -> List[BookAuthor]:
        return (
            self.session.query(BookAuthor)
            .order_by(BookAuthor.author_id, BookAuthor.book_id)
            .all()
        )
