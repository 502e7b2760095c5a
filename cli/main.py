# cli/main.py
import click
from core.config import settings
from core.logging_config import setup_logging
from .commands.server import serve, init_db
from .commands.topic import topic
from .commands.book import book

@click.group()
def cli():
    """Book and Topic Catalog CLI"""
    setup_logging(settings.log_level, settings.log_file)

cli.add_command(serve)
cli.add_command(init_db)
cli.add_command(topic)
cli.add_command(book)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
