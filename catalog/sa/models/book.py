from datetime import date
from sqlalchemy import String, Integer, Date, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class BookAuthor(Base, TimestampMixin):
    """Authorship link; identity is the (author_id, book_id) pair"""
    __tablename__ = 'book_author'

    # No ON DELETE CASCADE: dependent links are removed explicitly before
    # either endpoint, and the foreign keys reject anything else.
    author_id: Mapped[int] = mapped_column(ForeignKey('author.id'), primary_key=True)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), primary_key=True)

    # Relationships
    book = relationship('Book', back_populates='book_authors')
    author = relationship('Author', back_populates='book_authors')

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    publication_date: Mapped[date] = mapped_column(Date, nullable=False)
    isbn: Mapped[str] = mapped_column(String(13), nullable=False)

    # Relationships
    book_authors = relationship('BookAuthor', back_populates='book', passive_deletes='all')

    # Convenience relationship
    authors = relationship('Author', secondary='book_author', viewonly=True, order_by='Author.id')

    __table_args__ = (
        UniqueConstraint('isbn', name='uq_book_isbn'),
    )

    def __repr__(self):
        return f"<Book id={self.id} title='{self.title}'>"
