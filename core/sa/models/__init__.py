# core/sa/models/__init__.py
from .base import Base, TimestampMixin
from .topic import Topic
from .book import Book, BookTopic

__all__ = [
    'Base',
    'TimestampMixin',
    'Topic',
    'Book',
    'BookTopic'
]
