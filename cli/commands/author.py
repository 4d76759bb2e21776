import click
from ..utils import get_service, run, print_author

@click.group()
def author():
    """Author management commands"""
    pass

@author.command()
@click.argument('name')
def add(name: str):
    """Create an author

    Example:
        book-catalog author add "Ursula K. Le Guin"
    """
    service = get_service()
    created = run(lambda: service.create_author(name))
    click.echo(click.style("Created author ", fg='green') + f"{created.id}: {created.name}")

@author.command(name='list')
def list_authors():
    """List all authors with their book titles"""
    service = get_service()
    authors = run(service.list_authors)
    if not authors:
        click.echo("No authors found")
        return
    for entry in authors:
        print_author(entry)

@author.command()
@click.argument('author_id', type=int)
def show(author_id: int):
    """Show a single author"""
    service = get_service()
    print_author(run(lambda: service.get_author(author_id)))

@author.command()
@click.argument('author_id', type=int)
@click.argument('new_name')
def rename(author_id: int, new_name: str):
    """Rename an author; the author's books are unchanged"""
    service = get_service()
    run(lambda: service.update_author(author_id, new_name))
    click.echo(click.style("Renamed author ", fg='green') + f"{author_id} to {new_name}")

@author.command()
@click.argument('author_id', type=int)
def delete(author_id: int):
    """Delete an author; linked books are kept without this author"""
    service = get_service()
    run(lambda: service.delete_author(author_id))
    click.echo(click.style("Deleted author ", fg='green') + str(author_id))
