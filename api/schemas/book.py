# api/schemas/book.py
from datetime import date, datetime
from typing import List, Optional
from pydantic import Field, field_validator

from .common import CamelModel
from .topic import TopicSchema


class BookSchema(CamelModel):
    id: str
    title: str
    author: str
    published_date: Optional[date] = None
    isbn: str
    topics: List[TopicSchema] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookCreate(CamelModel):
    title: str = Field(..., min_length=1, description="The title of the book", examples=["The Great Gatsby"])
    author: str = Field(..., min_length=1, description="The author of the book", examples=["F. Scott Fitzgerald"])
    published_date: Optional[date] = Field(None, description="The published date of the book", examples=["1925-04-10"])
    isbn: str = Field(..., min_length=1, description="The unique ISBN of the book", examples=["978-0743273565"])
    topics: List[str] = Field(default_factory=list, description="IDs of the topics associated with the book")

    @field_validator('published_date', mode='before')
    @classmethod
    def empty_date_is_none(cls, value):
        # Convert empty strings to None
        if value == "":
            return None
        return value


class BookUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, description="The title of the book")
    author: Optional[str] = Field(None, min_length=1, description="The author of the book")
    published_date: Optional[date] = Field(None, description="The published date of the book")
    isbn: Optional[str] = Field(None, min_length=1, description="The unique ISBN of the book")
    topics: Optional[List[str]] = Field(None, description="IDs of the topics associated with the book; replaces the stored list")

    @field_validator('title', 'author', 'isbn')
    @classmethod
    def required_fields_not_null(cls, value, info):
        # Only runs when the client sent the field, so an explicit null is rejected
        if value is None:
            raise ValueError(f"{info.field_name} must not be null")
        return value

    @field_validator('published_date', mode='before')
    @classmethod
    def empty_date_is_none(cls, value):
        if value == "":
            return None
        return value

    @field_validator('topics')
    @classmethod
    def null_topics_clear_the_list(cls, value):
        return [] if value is None else value
