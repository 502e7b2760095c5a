# cli/commands/server.py
import click
import uvicorn
from core.config import settings
from core.sa.database import Database
from ..utils import db_url_option

@click.command()
@click.option('--host', default=None, help='Bind host (defaults to the HOST setting)')
@click.option('--port', default=None, type=int, help='Bind port (defaults to the PORT setting)')
@click.option('--reload/--no-reload', default=False, help='Reload on code changes')
def serve(host: str | None, port: int | None, reload: bool):
    """Run the API server"""
    host = host or settings.host
    port = port or settings.port
    click.echo(click.style(f"\nServing {settings.project_name} on http://{host}:{port}", fg='blue'))
    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=reload,
        reload_dirs=["api", "core"] if reload else None,
        log_level=settings.log_level.lower()
    )

@click.command(name='init-db')
@db_url_option
def init_db(db_url: str | None):
    """Create the database tables"""
    database = Database(db_url)
    database.init_db()
    database.dispose()
    click.echo(click.style("\nDatabase initialized", fg='green'))
