# api/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.repositories import BookRepository, TopicRepository
from core.services.book_service import BookService
from core.services.topic_service import TopicService


def get_topic_service(db: Session = Depends(get_db)) -> TopicService:
    return TopicService(TopicRepository(db))


def get_book_service(
    db: Session = Depends(get_db),
    topic_service: TopicService = Depends(get_topic_service),
) -> BookService:
    return BookService(BookRepository(db, topic_service))
