from sqlalchemy import Integer, String, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Author(Base, TimestampMixin):
    __tablename__ = 'author'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    book_authors = relationship('BookAuthor', back_populates='author', passive_deletes='all')

    # Convenience relationship
    books = relationship('Book', secondary='book_author', viewonly=True, order_by='Book.id')

    __table_args__ = (
        # Name lookups on book update
        Index('idx_author_name', 'name'),
    )

    def __repr__(self):
        return f"<Author id={self.id} name='{self.name}'>"
