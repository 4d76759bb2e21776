from typing import Optional, List
from sqlalchemy.orm import Session, joinedload
from ..models import Author, BookAuthor
from catalog.models.catalog import AuthorDetail

def to_author_detail(author: Author) -> AuthorDetail:
    """Project an author row onto its id, name and linked book titles"""
    links = sorted(author.book_authors, key=lambda ba: ba.book_id)
    return AuthorDetail(
        id=author.id,
        name=author.name,
        book_titles=[ba.book.title for ba in links]
    )

class AuthorRepository:
    def __init__(self, session: Session):
        self.session = session

    def _with_books(self):
        return self.session.query(Author).populate_existing().options(
            joinedload(Author.book_authors).joinedload(BookAuthor.book)
        )

    def list_authors(self) -> List[AuthorDetail]:
        """Get all authors with the titles of their books"""
        authors = self._with_books().order_by(Author.id).all()
        return [to_author_detail(author) for author in authors]

    def get_author(self, author_id: int) -> Optional[AuthorDetail]:
        """Get a single author with book titles, or None if not found"""
        author = self._with_books().filter(Author.id == author_id).first()
        return to_author_detail(author) if author else None

    def get_by_id(self, author_id: int) -> Optional[Author]:
        """Get the author row itself"""
        return self.session.get(Author, author_id)

    def find_by_name(self, name: str) -> Optional[Author]:
        """Get the author with exactly this name (lowest id wins on duplicates)"""
        return (
            self.session.query(Author)
            .filter(Author.name == name)
            .order_by(Author.id)
            .first()
        )

    def insert(self, name: str) -> Author:
        """Add an author and flush so its generated id is available"""
        author = Author(name=name)
        self.session.add(author)
        self.session.flush()
        return author

    def rename(self, author: Author, name: str) -> Author:
        author.name = name
        self.session.flush()
        return author

    def delete(self, author: Author) -> None:
        """Delete an author row. Its authorships must already be gone."""
        self.session.delete(author)
        self.session.flush()

    def count(self) -> int:
        return self.session.query(Author).count()
