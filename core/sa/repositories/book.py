# core/sa/repositories/book.py

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from core.errors import ConflictError, NotFoundError, ValidationError
from core.sa.models import Book, BookTopic

if TYPE_CHECKING:
    from core.services.topic_service import TopicService

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('title', 'author', 'published_date', 'isbn')


class BookRepository:
    """Repository for managing Book entities.

    Before a book is written, the repository checks that its ISBN is free and
    asks the topic service whether every referenced topic exists.
    """

    def __init__(self, session: Session, topic_service: "TopicService"):
        """Initialize the repository.

        Args:
            session: SQLAlchemy session for database operations
            topic_service: Service used to validate and resolve topic references
        """
        self.session = session
        self.topic_service = topic_service

    def check_topic_exists(self, topic_id: str) -> bool:
        """Check if a given topic ID refers to a stored topic."""
        return self.topic_service.exists(topic_id)

    def create(self, data: Dict[str, Any]) -> Book:
        """Create a new book after validating ISBN and topics.

        Args:
            data: Book fields (title, author, isbn, optional published_date
                  and topics as a list of topic IDs)

        Returns:
            The created Book with its topics populated

        Raises:
            ConflictError: If another book already has the ISBN
            ValidationError: If a listed topic does not exist
        """
        isbn = data['isbn']
        self._ensure_isbn_available(isbn)
        topic_ids = data.get('topics') or []
        self._ensure_topics_exist(topic_ids)

        book = Book(**{field: data[field] for field in UPDATABLE_FIELDS if field in data})
        book.topic_links = self._build_links(topic_ids)
        self.session.add(book)
        try:
            self.session.commit()
        except IntegrityError:
            # The unique constraint on book.isbn catches writers racing past the check above
            self.session.rollback()
            raise ConflictError(f"Book with ISBN {isbn} already exists.")
        logger.info(f"Created book {book.id} (ISBN {isbn})")
        return self.get_by_id(book.id)

    def find_all(self, limit: int, skip: int, filter_by_topic_name: Optional[str] = None) -> Tuple[List[Book], int]:
        """Get one page of books, optionally restricted by topic name.

        Args:
            limit: Maximum number of books to return
            skip: Number of matching books to skip
            filter_by_topic_name: Case-insensitive substring of a topic name; only
                                  books referencing a matching topic are returned

        Returns:
            Tuple of (books on the page with topics populated, total matching books)
        """
        topic_ids = None
        if filter_by_topic_name:
            topics = self.topic_service.find_by_name(filter_by_topic_name)
            if not topics:
                return [], 0
            topic_ids = [topic.id for topic in topics]

        query = self.session.query(Book)
        if topic_ids is not None:
            query = query.filter(Book.topic_links.any(BookTopic.topic_id.in_(topic_ids)))

        total = query.count()
        books = (
            query.options(selectinload(Book.topics))
            .order_by(Book.created_at, Book.id)
            .offset(skip)
            .limit(limit)
            .all()
        )
        return books, total

    def get_by_id(self, book_id: str) -> Optional[Book]:
        """Get a book by its ID with topics populated.

        Args:
            book_id: The ID of the book to retrieve

        Returns:
            The Book object if found, None otherwise
        """
        return (
            self.session.query(Book)
            .options(selectinload(Book.topics), selectinload(Book.topic_links))
            .filter(Book.id == book_id)
            .one_or_none()
        )

    def update(self, book_id: str, changes: Dict[str, Any]) -> Book:
        """Merge the given fields into a book.

        A ``topics`` entry replaces the stored topic list.

        Returns:
            The updated Book with topics populated

        Raises:
            NotFoundError: If the book does not exist
            ConflictError: If another book already has the new ISBN
            ValidationError: If a listed topic does not exist
        """
        book = self.get_by_id(book_id)
        if not book:
            raise NotFoundError("Book", book_id)

        isbn = changes.get('isbn')
        if isbn:
            self._ensure_isbn_available(isbn, exclude_id=book_id)
        topic_ids = changes.get('topics') or []
        self._ensure_topics_exist(topic_ids)

        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(book, field, changes[field])

        isbn = book.isbn
        try:
            if 'topics' in changes:
                # Flush the removals first so re-added links don't collide on the primary key
                book.topic_links.clear()
                self.session.flush()
                book.topic_links.extend(self._build_links(topic_ids))
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError(f"Book with ISBN {isbn} already exists.")
        logger.info(f"Updated book {book_id}")
        return self.get_by_id(book_id)

    def delete(self, book_id: str) -> None:
        """Delete a book and its topic links.

        Raises:
            NotFoundError: If the book does not exist
        """
        book = self.session.query(Book).filter(Book.id == book_id).one_or_none()
        if not book:
            raise NotFoundError("Book", book_id)
        self.session.delete(book)
        self.session.commit()
        logger.info(f"Deleted book {book_id}")

    def find_by_topic(self, topic_id: str) -> List[Book]:
        """Get all books referencing a topic, with topics populated."""
        return (
            self.session.query(Book)
            .options(selectinload(Book.topics))
            .filter(Book.topic_links.any(BookTopic.topic_id == topic_id))
            .order_by(Book.created_at, Book.id)
            .all()
        )

    def _ensure_isbn_available(self, isbn: str, exclude_id: Optional[str] = None) -> None:
        query = self.session.query(Book.id).filter(Book.isbn == isbn)
        if exclude_id is not None:
            query = query.filter(Book.id != exclude_id)
        if query.first() is not None:
            logger.warning(f"Rejected book write, ISBN {isbn} is taken")
            raise ConflictError(f"Book with ISBN {isbn} already exists.")

    def _ensure_topics_exist(self, topic_ids: Iterable[str]) -> None:
        # Stops at the first missing topic
        for topic_id in topic_ids:
            if not self.check_topic_exists(topic_id):
                logger.warning(f"Rejected book write, topic {topic_id} does not exist")
                raise ValidationError(f"Topic with ID {topic_id} does not exist")

    @staticmethod
    def _build_links(topic_ids: Iterable[str]) -> List[BookTopic]:
        links: List[BookTopic] = []
        seen = set()
        for topic_id in topic_ids:
            if topic_id in seen:
                continue
            seen.add(topic_id)
            links.append(BookTopic(topic_id=topic_id, position=len(links)))
        return links
