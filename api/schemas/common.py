# api/schemas/common.py

from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names while accepting snake_case input"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


DataT = TypeVar('DataT')


class Envelope(BaseModel, Generic[DataT]):
    """
    Uniform response wrapper: ``status`` is "success" or "error".
    """
    status: str = "success"
    data: Optional[DataT] = None
    message: Optional[str] = None


class PageData(CamelModel, Generic[DataT]):
    """
    Generic schema for paginated list data.
    """
    items: List[DataT]
    total_entries: int
    total_pages: int
    current_page: int
    items_per_page: int
