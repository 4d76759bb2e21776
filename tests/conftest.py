# tests/conftest.py
import sys
import pytest
from datetime import date
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from catalog.sa.database import Database
from catalog.sa.models import Author, Book, BookAuthor
from catalog.services.catalog_service import CatalogService

@pytest.fixture
def test_db_url(tmp_path):
    """A fresh SQLite file for each test"""
    return f"sqlite:///{tmp_path / 'test_catalog.db'}"

@pytest.fixture
def database(test_db_url):
    """Create a test database instance with the catalog schema"""
    db = Database(test_db_url)
    db.init_db()
    yield db
    db.drop_db()
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def service(database):
    return CatalogService(database)

@pytest.fixture
def sample_author(db_session):
    """Create a sample author for testing."""
    author = Author(name="Test Author")
    db_session.add(author)
    db_session.commit()
    return author

@pytest.fixture
def sample_book(db_session):
    """Create a sample book without authors."""
    book = Book(
        title="Test Book",
        publication_date=date(2020, 1, 1),
        isbn="9780000000001"
    )
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def sample_book_with_author(db_session, sample_book, sample_author):
    """Link the sample book to the sample author."""
    db_session.add(BookAuthor(author_id=sample_author.id, book_id=sample_book.id))
    db_session.commit()
    return sample_book

@pytest.fixture
def co_authored_book(db_session):
    """A book with two authors, plus a second book by the first author."""
    first = Author(name="First Author")
    second = Author(name="Second Author")
    shared = Book(title="Shared Book", publication_date=date(2019, 5, 1), isbn="9780000000002")
    solo = Book(title="Solo Book", publication_date=date(2021, 3, 1), isbn="9780000000003")
    db_session.add_all([first, second, shared, solo])
    db_session.flush()
    db_session.add_all([
        BookAuthor(author_id=first.id, book_id=shared.id),
        BookAuthor(author_id=second.id, book_id=shared.id),
        BookAuthor(author_id=first.id, book_id=solo.id),
    ])
    db_session.commit()
    return {"first": first, "second": second, "shared": shared, "solo": solo}
