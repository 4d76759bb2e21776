# catalog/services/catalog_service.py

import logging
from typing import List, Optional

from catalog.exceptions import ConstraintViolation
from catalog.models.catalog import AuthorDetail, AuthorSummary, BookDetail, BookFields
from catalog.sa.database import Database
from catalog.sa.repositories import AuthorRepository, BookAuthorRepository, BookRepository
from .results import Result
from .validation import validate_book_fields, validate_name

logger = logging.getLogger(__name__)

BOOK_NOT_FOUND = "Book not found."
AUTHOR_NOT_FOUND = "Author not found."
DUPLICATE_ISBN = "ISBN must be unique."

class CatalogService:
    """Books, authors and the authorships between them.

    Every call runs in its own transaction from the gateway and either
    commits as a whole or leaves the store untouched. Expected failures
    come back as a Result; StoreFailure is raised.
    """

    def __init__(self, database: Database):
        self.database = database

    # Books

    def list_books(self) -> Result[List[BookDetail]]:
        with self.database.transaction() as session:
            return Result.success(BookRepository(session).list_books())

    def get_book(self, book_id: int) -> Result[BookDetail]:
        with self.database.transaction() as session:
            book = BookRepository(session).get_book(book_id)
        if book is None:
            return Result.not_found(BOOK_NOT_FOUND)
        return Result.success(book)

    def create_book(self, fields: BookFields, author_id: int) -> Result[BookDetail]:
        """Create a book linked to an existing author.

        Args:
            fields: Title, publication date and ISBN of the new book
            author_id: ID of the author to link

        Returns:
            Result holding the stored book with its authors, or the first
            validation_error, constraint_violation (ISBN taken) or
            not_found (unknown author)
        """
        problem = validate_book_fields(fields)
        if problem:
            return Result.validation_error(problem)

        try:
            with self.database.transaction() as session:
                books = BookRepository(session)
                if books.find_by_isbn(fields.isbn) is not None:
                    return Result.constraint_violation(DUPLICATE_ISBN)
                if AuthorRepository(session).get_by_id(author_id) is None:
                    return Result.not_found(AUTHOR_NOT_FOUND)

                book = books.insert(fields)
                BookAuthorRepository(session).insert(author_id, book.id)
                created = books.get_book(book.id)
        except ConstraintViolation as e:
            logger.warning(f"Book with ISBN {fields.isbn} rejected by store: {str(e)}")
            return Result.constraint_violation(str(e))

        logger.info(f"Created book {created.id} '{created.title}' for author {author_id}")
        return Result.success(created)

    def update_book(self, book_id: int, fields: BookFields, author_name: Optional[str]) -> Result[None]:
        """Overwrite a book's fields and relink it to the author named author_name.

        All existing authorships of the book are dropped. The author is
        looked up by exact name and created when no such author exists, so
        the book ends up with exactly one author.
        """
        try:
            with self.database.transaction() as session:
                books = BookRepository(session)
                authors = AuthorRepository(session)
                links = BookAuthorRepository(session)

                book = books.get_by_id(book_id)
                if book is None:
                    return Result.not_found(BOOK_NOT_FOUND)

                problem = validate_book_fields(fields) or validate_name(author_name)
                if problem:
                    return Result.validation_error(problem)

                holder = books.find_by_isbn(fields.isbn)
                if holder is not None and holder.id != book.id:
                    return Result.constraint_violation(DUPLICATE_ISBN)

                books.update_fields(book, fields)
                removed = links.delete_for_book(book.id)

                author = authors.find_by_name(author_name)
                if author is None:
                    author = authors.insert(author_name)
                    logger.info(f"Created author {author.id} '{author_name}' while updating book {book_id}")
                links.insert(author.id, book.id)
        except ConstraintViolation as e:
            logger.warning(f"Update of book {book_id} rejected by store: {str(e)}")
            return Result.constraint_violation(str(e))

        logger.info(f"Updated book {book_id}; replaced {removed} authorship(s) with author {author.id}")
        return Result.success()

    def delete_book(self, book_id: int) -> Result[None]:
        """Delete a book and its authorships; the authors stay"""
        try:
            with self.database.transaction() as session:
                books = BookRepository(session)
                book = books.get_by_id(book_id)
                if book is None:
                    return Result.not_found(BOOK_NOT_FOUND)

                removed = BookAuthorRepository(session).delete_for_book(book.id)
                books.delete(book)
        except ConstraintViolation as e:
            logger.warning(f"Delete of book {book_id} rejected by store: {str(e)}")
            return Result.constraint_violation(str(e))

        logger.info(f"Deleted book {book_id} and {removed} authorship(s)")
        return Result.success()

    # Authors

    def list_authors(self) -> Result[List[AuthorDetail]]:
        with self.database.transaction() as session:
            return Result.success(AuthorRepository(session).list_authors())

    def get_author(self, author_id: int) -> Result[AuthorDetail]:
        with self.database.transaction() as session:
            author = AuthorRepository(session).get_author(author_id)
        if author is None:
            return Result.not_found(AUTHOR_NOT_FOUND)
        return Result.success(author)

    def create_author(self, name: Optional[str]) -> Result[AuthorSummary]:
        # Duplicate names are allowed
        problem = validate_name(name)
        if problem:
            return Result.validation_error(problem)

        with self.database.transaction() as session:
            author = AuthorRepository(session).insert(name)
            created = AuthorSummary.model_validate(author)

        logger.info(f"Created author {created.id} '{created.name}'")
        return Result.success(created)

    def update_author(self, author_id: int, new_name: Optional[str]) -> Result[None]:
        """Rename an author in place; authorships are not touched"""
        try:
            with self.database.transaction() as session:
                authors = AuthorRepository(session)
                author = authors.get_by_id(author_id)
                if author is None:
                    return Result.not_found(AUTHOR_NOT_FOUND)

                problem = validate_name(new_name)
                if problem:
                    return Result.validation_error(problem)

                authors.rename(author, new_name)
        except ConstraintViolation as e:
            logger.warning(f"Rename of author {author_id} rejected by store: {str(e)}")
            return Result.constraint_violation(str(e))

        logger.info(f"Renamed author {author_id} to '{new_name}'")
        return Result.success()

    def delete_author(self, author_id: int) -> Result[None]:
        """Delete an author and its authorships; the linked books stay"""
        try:
            with self.database.transaction() as session:
                authors = AuthorRepository(session)
                author = authors.get_by_id(author_id)
                if author is None:
                    return Result.not_found(AUTHOR_NOT_FOUND)

                removed = BookAuthorRepository(session).delete_for_author(author.id)
                authors.delete(author)
        except ConstraintViolation as e:
            logger.warning(f"Delete of author {author_id} rejected by store: {str(e)}")
            return Result.constraint_violation(str(e))

        logger.info(f"Deleted author {author_id} and {removed} authorship(s)")
        return Result.success()
