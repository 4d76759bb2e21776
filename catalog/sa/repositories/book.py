from typing import Optional, List
from sqlalchemy.orm import Session, joinedload
from ..models import Book, BookAuthor
from catalog.models.catalog import AuthorSummary, BookDetail, BookFields

def to_book_detail(book: Book) -> BookDetail:
    """Build a plain BookDetail from a row whose authors are already loaded"""
    links = sorted(book.book_authors, key=lambda ba: ba.author_id)
    return BookDetail(
        id=book.id,
        title=book.title,
        publication_date=book.publication_date,
        isbn=book.isbn,
        authors=[AuthorSummary(id=ba.author.id, name=ba.author.name) for ba in links]
    )

class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def _with_authors(self):
        return self.session.query(Book).populate_existing().options(
            joinedload(Book.book_authors).joinedload(BookAuthor.author)
        )

    def list_books(self) -> List[BookDetail]:
        """Get all books with their authors resolved"""
        books = self._with_authors().order_by(Book.id).all()
        return [to_book_detail(book) for book in books]

    def get_book(self, book_id: int) -> Optional[BookDetail]:
        """Get a single book with its authors resolved, or None if not found"""
        book = self._with_authors().filter(Book.id == book_id).first()
        return to_book_detail(book) if book else None

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get the book row itself, for updates and deletes"""
        return self.session.get(Book, book_id)

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get the book holding an ISBN"""
        return self.session.query(Book).filter(Book.isbn == isbn).first()

    def insert(self, fields: BookFields) -> Book:
        """Add a book and flush so its generated id is available.

        Args:
            fields: Validated title, publication_date and isbn

        Returns:
            The stored Book row
        """
        book = Book(
            title=fields.title,
            publication_date=fields.publication_date,
            isbn=fields.isbn
        )
        self.session.add(book)
        self.session.flush()
        return book

    def update_fields(self, book: Book, fields: BookFields) -> Book:
        """Overwrite title, publication_date and isbn of an existing row"""
        book.title = fields.title
        book.publication_date = fields.publication_date
        book.isbn = fields.isbn
        self.session.flush()
        return book

    def delete(self, book: Book) -> None:
        """Delete a book row. Its authorships must already be gone."""
        self.session.delete(book)
        self.session.flush()

    def count(self) -> int:
        return self.session.query(Book).count()
