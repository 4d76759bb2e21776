# api/schemas/book.py
from datetime import date
from typing import Optional, List
from pydantic import BaseModel, ConfigDict

class AuthorBase(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)

class Book(BaseModel):
    id: int
    title: str
    publication_date: date
    isbn: str
    authors: List[AuthorBase] = []

    model_config = ConfigDict(from_attributes=True)

class BookFieldsIn(BaseModel):
    # Left optional so that missing values reach the service checks (400) instead of 422
    title: Optional[str] = None
    publication_date: Optional[date] = None
    isbn: Optional[str] = None

class BookCreate(BaseModel):
    author_id: int
    book: BookFieldsIn

class BookUpdate(BookFieldsIn):
    pass
