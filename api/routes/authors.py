# api/routes/authors.py

from typing import List
from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_service
from api.errors import unwrap
from api.schemas.author import Author, AuthorCreate, AuthorUpdate, AuthorWithBooks
from catalog.services.catalog_service import CatalogService

router = APIRouter(prefix="/authors", tags=["authors"])

@router.get("", response_model=List[AuthorWithBooks])
def get_authors(service: CatalogService = Depends(get_service)):
    """Get all authors with the titles of their books"""
    return unwrap(service.list_authors())

@router.get("/{author_id}", response_model=AuthorWithBooks)
def get_author(author_id: int, service: CatalogService = Depends(get_service)):
    """
    Get a single author with the titles of their books.

    Raises:
        HTTPException: 404 if the author is not found
    """
    return unwrap(service.get_author(author_id))

@router.post("", response_model=Author, status_code=status.HTTP_201_CREATED)
def create_author(
    payload: AuthorCreate,
    response: Response,
    service: CatalogService = Depends(get_service)
):
    """
    Create an author. Names need not be unique.

    Raises:
        HTTPException: 400 if the name is missing or blank
    """
    author = unwrap(service.create_author(payload.name))
    response.headers["Location"] = f"/authors/{author.id}"
    return author

@router.put("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_author(
    author_id: int,
    payload: AuthorUpdate,
    service: CatalogService = Depends(get_service)
):
    """
    Rename an author.

    Raises:
        HTTPException: 404 if the author is not found, 400 if the new name is blank
    """
    unwrap(service.update_author(author_id, payload.new_name))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_author(author_id: int, service: CatalogService = Depends(get_service)):
    """
    Delete an author and its authorships. Linked books are kept.

    Raises:
        HTTPException: 404 if the author is not found
    """
    unwrap(service.delete_author(author_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
