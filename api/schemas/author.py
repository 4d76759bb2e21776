# api/schemas/author.py
from typing import Optional, List
from pydantic import BaseModel, ConfigDict

class Author(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)

class AuthorWithBooks(Author):
    book_titles: List[str] = []

class AuthorCreate(BaseModel):
    name: Optional[str] = None

class AuthorUpdate(BaseModel):
    new_name: Optional[str] = None
