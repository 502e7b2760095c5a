# api/schemas/__init__.py
from .common import CamelModel, Envelope, PageData
from .topic import TopicSchema, TopicCreate, TopicUpdate
from .book import BookSchema, BookCreate, BookUpdate

__all__ = [
    'CamelModel',
    'Envelope',
    'PageData',
    'TopicSchema',
    'TopicCreate',
    'TopicUpdate',
    'BookSchema',
    'BookCreate',
    'BookUpdate',
]
