# core/sa/models/topic.py
from sqlalchemy import String, Index
from sqlalchemy.orm import Mapped, mapped_column
from core.identifiers import new_identifier
from .base import Base, TimestampMixin

class Topic(Base, TimestampMixin):
    __tablename__ = 'topic'

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_identifier)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (
        # Search index
        Index('idx_topic_name', 'name'),
    )

    def __repr__(self) -> str:
        return f"<Topic id={self.id!r} name={self.name!r}>"
