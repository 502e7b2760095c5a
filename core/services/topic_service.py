# core/services/topic_service.py

import logging
from typing import Any, Dict, List, Optional

from core.errors import NotFoundError
from core.identifiers import require_identifier
from core.pagination import Page, Pagination
from core.sa.models import Topic
from core.sa.repositories.topic import TopicRepository

logger = logging.getLogger(__name__)


class TopicService:
    def __init__(self, repository: TopicRepository):
        self.repository = repository

    def create(self, name: str, description: Optional[str] = None) -> Topic:
        return self.repository.create(name=name, description=description)

    def list_topics(self, page: Optional[int] = None, limit: Optional[int] = None,
                    filter_by_name: Optional[str] = None) -> Page[Topic]:
        """Get one page of topics, optionally filtered by a name substring"""
        pagination = Pagination.from_params(page, limit)
        topics, total = self.repository.search(
            name_filter=filter_by_name,
            limit=pagination.limit,
            offset=pagination.skip,
        )
        return Page(items=topics, total_entries=total, pagination=pagination)

    def get(self, topic_id: str) -> Topic:
        require_identifier(topic_id)
        topic = self.repository.get_by_id(topic_id)
        if not topic:
            raise NotFoundError("Topic", topic_id)
        return topic

    def exists(self, topic_id: str) -> bool:
        """Check whether a topic exists.

        A well-formed but unknown ID is simply ``False``; a malformed one
        raises ``InvalidIdentifierError``.
        """
        require_identifier(topic_id)
        return self.repository.exists(topic_id)

    def update(self, topic_id: str, changes: Dict[str, Any]) -> Topic:
        require_identifier(topic_id)
        return self.repository.update(topic_id, changes)

    def delete(self, topic_id: str) -> str:
        require_identifier(topic_id)
        self.repository.delete(topic_id)
        return "Topic deleted successfully"

    def find_by_name(self, fragment: str) -> List[Topic]:
        """Get all topics whose name contains ``fragment``, ignoring case"""
        topics = self.repository.find_by_name(fragment)
        logger.debug(f"Topic name search {fragment!r} matched {len(topics)} topics")
        return topics
