# core/sa/__init__.py
from .database import Database
from .models import Base, Topic, Book, BookTopic

__all__ = [
    'Database',
    'Base',
    'Topic',
    'Book',
    'BookTopic'
]
