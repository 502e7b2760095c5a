# cli/utils.py
import click
from contextlib import contextmanager
from typing import Iterator, Tuple
from core.errors import DomainError
from core.sa.database import Database
from core.sa.repositories import BookRepository, TopicRepository
from core.services.book_service import BookService
from core.services.topic_service import TopicService

db_url_option = click.option(
    '--db-url', default=None,
    help='SQLAlchemy database URL (defaults to the DATABASE_URL setting)'
)

@contextmanager
def open_services(db_url: str | None) -> Iterator[Tuple[TopicService, BookService]]:
    """Yield topic and book services sharing one session.

    Domain errors are reported in red and turned into exit status 1.
    """
    database = Database(db_url)
    database.init_db()
    session = database.get_session()
    try:
        topic_service = TopicService(TopicRepository(session))
        book_service = BookService(BookRepository(session, topic_service))
        yield topic_service, book_service
    except DomainError as e:
        click.echo(click.style(f"\nError: {e.message}", fg='red'), err=True)
        raise SystemExit(1)
    finally:
        session.close()
        database.dispose()

def print_page_footer(page) -> None:
    """Print pagination metadata for a Page"""
    click.echo(click.style(
        f"\nPage {page.pagination.page} of {page.total_pages} "
        f"({page.total_entries} total, {page.pagination.limit} per page)",
        fg='blue'
    ))
