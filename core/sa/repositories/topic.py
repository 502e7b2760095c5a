# core/sa/repositories/topic.py

import logging
from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from core.errors import ConflictError, NotFoundError
from core.sa.models import Topic

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('name', 'description')


def name_contains(column, fragment: str):
    """Case-insensitive substring filter that matches ``fragment`` literally."""
    escaped = fragment.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return column.ilike(f"%{escaped}%", escape='\\')


class TopicRepository:
    """Repository for managing Topic entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def create(self, name: str, description: Optional[str] = None) -> Topic:
        """Create a new topic.

        Args:
            name: The unique name of the topic
            description: Optional free-text description

        Returns:
            The created Topic object

        Raises:
            ConflictError: If a topic with the given name already exists
        """
        if self.get_by_name(name):
            logger.warning(f"Rejected topic create, name {name!r} is taken")
            raise ConflictError(f"Topic with name {name} already exists.")

        topic = Topic(name=name, description=description)
        self.session.add(topic)
        self._commit(name)
        self.session.refresh(topic)
        logger.info(f"Created topic {topic.id} ({name!r})")
        return topic

    def get_by_id(self, topic_id: str) -> Optional[Topic]:
        """Get a topic by its ID.

        Args:
            topic_id: The ID of the topic to retrieve

        Returns:
            The Topic object if found, None otherwise
        """
        return self.session.query(Topic).filter(Topic.id == topic_id).one_or_none()

    def get_by_name(self, name: str, exclude_id: Optional[str] = None) -> Optional[Topic]:
        """Get a topic by its exact (case-sensitive) name.

        Args:
            name: The name of the topic to retrieve
            exclude_id: Ignore the topic with this ID (used when renaming)

        Returns:
            The Topic object if found, None otherwise
        """
        query = self.session.query(Topic).filter(Topic.name == name)
        if exclude_id is not None:
            query = query.filter(Topic.id != exclude_id)
        return query.first()

    def exists(self, topic_id: str) -> bool:
        """Check whether a topic with the given ID is stored."""
        return self.session.query(Topic.id).filter(Topic.id == topic_id).first() is not None

    def search(self, name_filter: Optional[str] = None, limit: int = 10, offset: int = 0) -> Tuple[List[Topic], int]:
        """Get one page of topics, optionally filtered by name.

        Args:
            name_filter: Case-insensitive substring the name must contain
            limit: Maximum number of topics to return
            offset: Number of matching topics to skip

        Returns:
            Tuple of (topics on the page, total number of matching topics)
        """
        query = self.session.query(Topic)
        if name_filter:
            query = query.filter(name_contains(Topic.name, name_filter))

        total = query.count()
        topics = (
            query.order_by(Topic.created_at, Topic.id)
            .offset(offset)
            .limit(limit)
            .all()
        )
        return topics, total

    def find_by_name(self, fragment: str) -> List[Topic]:
        """Get every topic whose name contains ``fragment``, ignoring case."""
        return self.session.query(Topic).filter(name_contains(Topic.name, fragment)).all()

    def update(self, topic_id: str, changes: Dict[str, Any]) -> Topic:
        """Update a topic's fields.

        Args:
            topic_id: The ID of the topic to update
            changes: Mapping of field name to new value; only these fields change

        Returns:
            The updated Topic object

        Raises:
            NotFoundError: If the topic does not exist
            ConflictError: If another topic already uses the new name
        """
        topic = self.get_by_id(topic_id)
        if not topic:
            raise NotFoundError("Topic", topic_id)

        name = changes.get('name')
        if name and self.get_by_name(name, exclude_id=topic_id):
            logger.warning(f"Rejected rename of topic {topic_id}, name {name!r} is taken")
            raise ConflictError(f"Topic with name {name} already exists.")

        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(topic, field, changes[field])

        self._commit(name)
        self.session.refresh(topic)
        logger.info(f"Updated topic {topic_id}")
        return topic

    def delete(self, topic_id: str) -> None:
        """Delete a topic.

        Books referencing the topic keep the (now dangling) identifier.

        Raises:
            NotFoundError: If the topic does not exist
        """
        deleted = self.session.query(Topic).filter(Topic.id == topic_id).delete()
        self.session.commit()
        if deleted == 0:
            raise NotFoundError("Topic", topic_id)
        logger.info(f"Deleted topic {topic_id}")

    def _commit(self, name: Optional[str]) -> None:
        # The unique constraint on topic.name catches writers racing past the check above
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError(f"Topic with name {name} already exists.")
