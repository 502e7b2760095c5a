# core/sa/repositories/__init__.py
from .topic import TopicRepository
from .book import BookRepository

__all__ = ['TopicRepository', 'BookRepository']
