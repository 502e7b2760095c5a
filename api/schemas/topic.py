# api/schemas/topic.py
from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator

from .common import CamelModel


class TopicSchema(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TopicCreate(CamelModel):
    name: str = Field(..., min_length=1, description="The name of the Topic", examples=["Fiction"])
    description: Optional[str] = Field(None, description="The description of the Topic", examples=["All fictional works."])


class TopicUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, description="The name of the Topic", examples=["Fiction"])
    description: Optional[str] = Field(None, description="The description of the Topic", examples=["All fictional works."])

    @field_validator('name')
    @classmethod
    def name_not_null(cls, value):
        # Only runs when the client sent the field, so an explicit null is rejected
        if value is None:
            raise ValueError("name must not be null")
        return value
