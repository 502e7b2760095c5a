# cli/commands/topic.py
import click
from ..utils import db_url_option, open_services, print_page_footer

@click.group()
def topic():
    """Topic management commands"""
    pass

@topic.command()
@click.argument('name')
@click.option('--description', default=None, help='Topic description')
@db_url_option
def add(name: str, description: str | None, db_url: str | None):
    """
    Create a topic.

    NAME must not already be used by another topic.
    """
    with open_services(db_url) as (topic_service, _):
        created = topic_service.create(name=name, description=description)
        click.echo(click.style(f"\nCreated topic '{created.name}' ", fg='green') +
                   click.style(f"(ID: {created.id})", fg='cyan'))

@topic.command(name="list")
@click.option('--filter', 'name_filter', default=None, help='Case-insensitive name substring')
@click.option('--page', default=1, type=click.IntRange(min=0), help='Page number')
@click.option('--limit', default=10, type=click.IntRange(min=0), help='Topics per page')
@db_url_option
def list_topics(name_filter: str | None, page: int, limit: int, db_url: str | None):
    """List topics, optionally filtered by name"""
    with open_services(db_url) as (topic_service, _):
        result = topic_service.list_topics(page=page, limit=limit, filter_by_name=name_filter)
        if not result.items:
            click.echo("\nNo topics found.")
            return
        click.echo("\nTopics:")
        for item in result.items:
            description = f" - {item.description}" if item.description else ""
            click.echo(f" - {item.name} (ID: {item.id}){description}")
        print_page_footer(result)
