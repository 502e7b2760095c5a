# tests/conftest.py
import sys
import pytest
from pathlib import Path
from sqlalchemy.sql import text

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from core.sa.database import Database, get_db
from core.sa.models import Topic
from core.sa.repositories import BookRepository, TopicRepository
from core.services.book_service import BookService
from core.services.topic_service import TopicService

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_catalog.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    db.drop_db()
    db.init_db()

    yield db

    db.dispose()

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Delete all data from tables in reverse order of dependencies
    db_session.execute(text("DELETE FROM book_topic"))
    db_session.execute(text("DELETE FROM book"))
    db_session.execute(text("DELETE FROM topic"))
    db_session.commit()
    yield
    # Clean up after test as well
    db_session.rollback()

@pytest.fixture
def topic_repo(db_session):
    """Fixture to create a TopicRepository instance."""
    return TopicRepository(db_session)

@pytest.fixture
def topic_service(topic_repo):
    return TopicService(topic_repo)

@pytest.fixture
def book_repo(db_session, topic_service):
    """Fixture to create a BookRepository wired to the real topic service."""
    return BookRepository(db_session, topic_service)

@pytest.fixture
def book_service(book_repo):
    return BookService(book_repo)

@pytest.fixture
def sample_topic(db_session):
    """Create a sample topic for testing."""
    topic = Topic(name="Fiction", description="All fictional works.")
    db_session.add(topic)
    db_session.commit()
    return topic

@pytest.fixture
def second_topic(db_session):
    """Create a second topic for testing."""
    topic = Topic(name="Science")
    db_session.add(topic)
    db_session.commit()
    return topic

@pytest.fixture
def sample_book(book_repo, sample_topic):
    """Create a sample book linked to the sample topic."""
    return book_repo.create({
        "title": "Test Book",
        "author": "Test Author",
        "isbn": "1234567890",
        "topics": [sample_topic.id],
    })

@pytest.fixture
def client(database):
    """API test client whose requests use the test database"""
    from api.main import app

    def override_get_db():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
