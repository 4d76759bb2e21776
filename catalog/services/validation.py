# catalog/services/validation.py

import re
from datetime import date
from typing import Optional

from catalog.models.catalog import BookFields

# ASCII digits only; \d would also accept other Unicode digits
ISBN_PATTERN = re.compile(r"[0-9]{13}")

def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()

def is_valid_isbn(isbn: Optional[str]) -> bool:
    return isbn is not None and ISBN_PATTERN.fullmatch(isbn) is not None

def validate_book_fields(fields: BookFields) -> Optional[str]:
    """Return a message for the first invalid field, or None if all are valid"""
    if is_blank(fields.title):
        return "Title is required."
    if not is_valid_isbn(fields.isbn):
        return "ISBN must be a 13-digit number."
    # date.min is the unset default of some clients
    if fields.publication_date is None or fields.publication_date == date.min:
        return "Publication date is required."
    return None

def validate_name(name: Optional[str], label: str = "Author name") -> Optional[str]:
    if is_blank(name):
        return f"{label} is required."
    return None
