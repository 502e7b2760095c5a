# core/sa/models/book.py
from datetime import date
from sqlalchemy import String, Integer, Date, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from core.identifiers import new_identifier
from .base import Base, TimestampMixin

class BookTopic(Base):
    """Ordered link from a book to a topic identifier.

    ``topic_id`` is a plain column without a foreign key: a book only holds
    weak references to topics, and deleting a topic leaves the link behind.
    """
    __tablename__ = 'book_topic'

    book_id: Mapped[str] = mapped_column(ForeignKey('book.id', ondelete='CASCADE'), primary_key=True)
    topic_id: Mapped[str] = mapped_column(String(32), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    book = relationship('Book', back_populates='topic_links')

    __table_args__ = (
        Index('idx_book_topic_topic_id', 'topic_id'),
    )

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_identifier)
    title: Mapped[str] = mapped_column(String, nullable=False)
    author: Mapped[str] = mapped_column(String, nullable=False)
    published_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    isbn: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)

    # Relationships
    topic_links = relationship(
        'BookTopic',
        back_populates='book',
        order_by='BookTopic.position',
        cascade='all, delete-orphan',
    )

    # Read-time join resolving the stored identifiers to Topic records.
    # Links whose topic no longer exists drop out of the inner join.
    topics = relationship(
        'Topic',
        secondary='book_topic',
        primaryjoin='Book.id == BookTopic.book_id',
        secondaryjoin='foreign(BookTopic.topic_id) == Topic.id',
        order_by='BookTopic.position',
        viewonly=True,
    )

    @property
    def topic_ids(self) -> list[str]:
        """Stored topic identifiers in order, including dangling ones"""
        return [link.topic_id for link in self.topic_links]

    def __repr__(self) -> str:
        return f"<Book id={self.id!r} isbn={self.isbn!r}>"
