# cli/main.py
import logging
import os
import click
from typing import Optional
from catalog.sa.database import Database
from catalog.services.catalog_service import CatalogService
from .commands.author import author
from .commands.book import book

@click.group()
@click.option('--database-url', default=None, help='Database connection string (defaults to $DATABASE_URL)')
@click.pass_context
def cli(ctx: click.Context, database_url: Optional[str]):
    """Book catalog CLI"""
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING"))
    database = Database(database_url)
    ctx.obj = CatalogService(database)
    ctx.call_on_close(database.dispose)

@cli.command(name='init-db')
@click.pass_obj
def init_db(service: CatalogService):
    """Create the catalog tables if they do not exist"""
    service.database.init_db()
    click.echo(click.style("Catalog tables ready at ", fg='green') + service.database.connection_string)

cli.add_command(author)
cli.add_command(book)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
