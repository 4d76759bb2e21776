# api/routes/books.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import get_service
from api.errors import unwrap
from api.schemas.book import Book, BookCreate, BookUpdate
from catalog.models.catalog import BookFields
from catalog.services.catalog_service import CatalogService

router = APIRouter(prefix="/books", tags=["books"])

@router.get("", response_model=List[Book])
def get_books(service: CatalogService = Depends(get_service)):
    """
    Get all books with their authors.

    Returns:
        List of books, each with its resolved authors
    """
    return unwrap(service.list_books())

@router.get("/{book_id}", response_model=Book)
def get_book(book_id: int, service: CatalogService = Depends(get_service)):
    """
    Get a single book by ID.

    Raises:
        HTTPException: 404 if the book is not found
    """
    return unwrap(service.get_book(book_id))

@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: BookCreate,
    response: Response,
    service: CatalogService = Depends(get_service)
):
    """
    Create a book and link it to an existing author.

    Args:
        payload: author_id plus the book's title, publication_date and isbn
        response: Used to set the Location header

    Returns:
        The created book with its author

    Raises:
        HTTPException: 400 for invalid data or a duplicate ISBN, 404 for an unknown author
    """
    fields = BookFields(**payload.book.model_dump())
    book = unwrap(service.create_book(fields, payload.author_id))
    response.headers["Location"] = f"/books/{book.id}"
    return book

@router.put("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_book(
    book_id: int,
    payload: BookUpdate,
    author_name: Optional[str] = Query(None, description="Name of the author the book is relinked to"),
    service: CatalogService = Depends(get_service)
):
    """
    Update a book's fields and replace its authors with the author named author_name.

    The author is created if no author has exactly that name.

    Raises:
        HTTPException: 404 if the book is not found, 400 for invalid data or a duplicate ISBN
    """
    fields = BookFields(**payload.model_dump())
    unwrap(service.update_book(book_id, fields, author_name))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, service: CatalogService = Depends(get_service)):
    """
    Delete a book and its authorships. Linked authors are kept.

    Raises:
        HTTPException: 404 if the book is not found
    """
    unwrap(service.delete_book(book_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
