# catalog/models/catalog.py

from datetime import date
from typing import Optional, List
from pydantic import BaseModel, ConfigDict

class AuthorSummary(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)

class BookDetail(BaseModel):
    """A book with its authors resolved"""
    id: int
    title: str
    publication_date: date
    isbn: str
    authors: List[AuthorSummary] = []

    model_config = ConfigDict(from_attributes=True)

class AuthorDetail(BaseModel):
    """An author with the titles of the linked books"""
    id: int
    name: str
    book_titles: List[str] = []

class BookFields(BaseModel):
    """Book fields as supplied by a caller; checked by the service before any write"""
    title: Optional[str] = None
    publication_date: Optional[date] = None
    isbn: Optional[str] = None
