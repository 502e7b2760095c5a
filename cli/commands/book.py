# cli/commands/book.py
import click
from ..utils import db_url_option, open_services, print_page_footer

@click.group()
def book():
    """Book management commands"""
    pass

@book.command(name="list")
@click.option('--topic-name', default=None, help='Only books in topics whose name contains this text')
@click.option('--page', default=1, type=click.IntRange(min=0), help='Page number')
@click.option('--limit', default=10, type=click.IntRange(min=0), help='Books per page')
@db_url_option
def list_books(topic_name: str | None, page: int, limit: int, db_url: str | None):
    """List books with their topics"""
    with open_services(db_url) as (_, book_service):
        result = book_service.list_books(page=page, limit=limit, filter_by_topic_name=topic_name)
        if not result.items:
            click.echo("\nNo books found.")
            return
        click.echo("\nBooks:")
        for item in result.items:
            topics = ", ".join(t.name for t in item.topics) or "no topics"
            click.echo(f" - {item.title} by {item.author} (ISBN: {item.isbn}, ID: {item.id}) [{topics}]")
        print_page_footer(result)
