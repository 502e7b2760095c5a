# core/services/book_service.py

from typing import Any, Dict, List, Optional

from core.errors import NotFoundError
from core.identifiers import require_identifier
from core.pagination import Page, Pagination
from core.sa.models import Book
from core.sa.repositories.book import BookRepository


class BookService:
    def __init__(self, repository: BookRepository):
        self.repository = repository

    def create(self, data: Dict[str, Any]) -> Book:
        """Create a book; ISBN and topic checks happen in the repository"""
        return self.repository.create(data)

    def list_books(self, page: Optional[int] = None, limit: Optional[int] = None,
                   filter_by_topic_name: Optional[str] = None) -> Page[Book]:
        """Get one page of books, optionally only those in topics matching a name"""
        pagination = Pagination.from_params(page, limit)
        books, total = self.repository.find_all(
            limit=pagination.limit,
            skip=pagination.skip,
            filter_by_topic_name=filter_by_topic_name,
        )
        return Page(items=books, total_entries=total, pagination=pagination)

    def get(self, book_id: str) -> Book:
        require_identifier(book_id)
        book = self.repository.get_by_id(book_id)
        if not book:
            raise NotFoundError("Book", book_id)
        return book

    def update(self, book_id: str, changes: Dict[str, Any]) -> Book:
        require_identifier(book_id)
        return self.repository.update(book_id, changes)

    def delete(self, book_id: str) -> str:
        require_identifier(book_id)
        self.repository.delete(book_id)
        return "Book deleted successfully"

    def find_by_topic(self, topic_id: str) -> List[Book]:
        """Get all books referencing a topic.

        Raises:
            InvalidIdentifierError: If ``topic_id`` is malformed
            NotFoundError: If no book references the topic
        """
        require_identifier(topic_id)
        books = self.repository.find_by_topic(topic_id)
        if not books:
            raise NotFoundError("Book", topic_id, message=f"No books found for the topic {topic_id}")
        return books
