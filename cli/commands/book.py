import click
from datetime import datetime
from typing import Optional
from catalog.models.catalog import BookFields
from ..utils import get_service, run, print_book

def _as_date(value: Optional[datetime]):
    return value.date() if value else None

@click.group()
def book():
    """Book related commands"""
    pass

@book.command()
@click.option('--title', required=True, help='Book title')
@click.option('--isbn', required=True, help='13-digit ISBN')
@click.option('--published', required=True, type=click.DateTime(formats=['%Y-%m-%d']), help='Publication date (YYYY-MM-DD)')
@click.option('--author-id', required=True, type=int, help='ID of an existing author')
def add(title: str, isbn: str, published: datetime, author_id: int):
    """Create a book linked to an existing author

    Example:
        book-catalog book add --title "The Dispossessed" --isbn 9780060512750 --published 1974-05-01 --author-id 1
    """
    service = get_service()
    fields = BookFields(title=title, isbn=isbn, publication_date=_as_date(published))
    created = run(lambda: service.create_book(fields, author_id))
    click.echo(click.style("Created book:", fg='green'))
    print_book(created)

@book.command(name='list')
def list_books():
    """List all books with their authors"""
    service = get_service()
    books = run(service.list_books)
    if not books:
        click.echo("No books found")
        return
    for entry in books:
        print_book(entry)

@book.command()
@click.argument('book_id', type=int)
def show(book_id: int):
    """Show a single book"""
    service = get_service()
    print_book(run(lambda: service.get_book(book_id)))

@book.command()
@click.argument('book_id', type=int)
@click.option('--title', required=True, help='New title')
@click.option('--isbn', required=True, help='New 13-digit ISBN')
@click.option('--published', required=True, type=click.DateTime(formats=['%Y-%m-%d']), help='New publication date (YYYY-MM-DD)')
@click.option('--author-name', required=True, help='Author to relink the book to; created if unknown')
def update(book_id: int, title: str, isbn: str, published: datetime, author_name: str):
    """Update a book and replace its authors with a single named author

    Example:
        book-catalog book update 1 --title "Go Deeper" --isbn 0000000000001 --published 2021-01-01 --author-name "A. Lee"
    """
    service = get_service()
    fields = BookFields(title=title, isbn=isbn, publication_date=_as_date(published))
    run(lambda: service.update_book(book_id, fields, author_name))
    click.echo(click.style("Updated book ", fg='green') + str(book_id))

@book.command()
@click.argument('book_id', type=int)
def delete(book_id: int):
    """Delete a book and its authorships"""
    service = get_service()
    run(lambda: service.delete_book(book_id))
    click.echo(click.style("Deleted book ", fg='green') + str(book_id))
