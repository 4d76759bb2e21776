import click
from typing import Any, Callable

from catalog.exceptions import StoreFailure
from catalog.models.catalog import AuthorDetail, BookDetail
from catalog.services.catalog_service import CatalogService
from catalog.services.results import Result

def get_service() -> CatalogService:
    """The service built by the root command for this invocation"""
    return click.get_current_context().find_object(CatalogService)

def run(call: Callable[[], Result]) -> Any:
    """Run a service call and return its value.

    Expected failures and store failures are printed in red and end the
    command with exit status 1.
    """
    ctx = click.get_current_context()
    try:
        result = call()
    except StoreFailure as e:
        click.echo(click.style(f"Store error: {str(e)}", fg='red'), err=True)
        ctx.exit(1)

    if not result.ok:
        click.echo(click.style(f"{result.error.kind.value}: {result.error.message}", fg='red'), err=True)
        ctx.exit(1)
    return result.value

def print_book(book: BookDetail) -> None:
    click.echo(click.style(f"[{book.id}] ", fg='blue') + click.style(book.title, fg='cyan'))
    click.echo(f"  ISBN: {book.isbn}")
    click.echo(f"  Published: {book.publication_date.isoformat()}")
    authors = ', '.join(author.name for author in book.authors) or '-'
    click.echo(f"  Author(s): {authors}")

def print_author(author: AuthorDetail) -> None:
    click.echo(click.style(f"[{author.id}] ", fg='blue') + click.style(author.name, fg='cyan'))
    titles = ', '.join(author.book_titles) or '-'
    click.echo(f"  Books: {titles}")
