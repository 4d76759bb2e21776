import pytest
from catalog.exceptions import ConstraintViolation
from catalog.sa.models import Author, Book
from catalog.sa.repositories import BookAuthorRepository

@pytest.fixture
def link_repo(db_session):
    return BookAuthorRepository(db_session)

def test_insert_link(link_repo, db_session, sample_book, sample_author):
    link_repo.insert(sample_author.id, sample_book.id)
    db_session.commit()
    assert link_repo.exists(sample_author.id, sample_book.id)

def test_insert_duplicate_pair(link_repo, sample_book_with_author, sample_author):
    with pytest.raises(ConstraintViolation):
        link_repo.insert(sample_author.id, sample_book_with_author.id)

def test_insert_missing_author(link_repo, sample_book):
    with pytest.raises(ConstraintViolation):
        link_repo.insert(999, sample_book.id)

def test_insert_missing_book(link_repo, sample_author):
    with pytest.raises(ConstraintViolation):
        link_repo.insert(sample_author.id, 999)

def test_delete_for_book(link_repo, db_session, co_authored_book):
    removed = link_repo.delete_for_book(co_authored_book["shared"].id)
    db_session.commit()

    assert removed == 2
    remaining = [(link.author_id, link.book_id) for link in link_repo.list_all()]
    assert remaining == [(co_authored_book["first"].id, co_authored_book["solo"].id)]

def test_delete_for_author(link_repo, db_session, co_authored_book):
    removed = link_repo.delete_for_author(co_authored_book["first"].id)
    db_session.commit()

    assert removed == 2
    remaining = [(link.author_id, link.book_id) for link in link_repo.list_all()]
    assert remaining == [(co_authored_book["second"].id, co_authored_book["shared"].id)]

    # Endpoints are untouched
    assert db_session.query(Author).count() == 2
    assert db_session.query(Book).count() == 2

def test_delete_for_unlinked_book(link_repo, sample_book):
    assert link_repo.delete_for_book(sample_book.id) == 0
