# api/routes/topics.py

from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_topic_service
from api.schemas import Envelope, PageData, TopicCreate, TopicSchema, TopicUpdate
from core.services.topic_service import TopicService

router = APIRouter(prefix="/topics", tags=["topics"])


@router.get("", response_model=Envelope[PageData[TopicSchema]])
def get_topics(
    page: Optional[int] = Query(None, ge=0, description="Page number"),
    limit: Optional[int] = Query(None, ge=0, description="Items per page"),
    filter_by_name: Optional[str] = Query(None, alias="filterByName", description="Filter Topics by Name"),
    service: TopicService = Depends(get_topic_service),
):
    """
    Get a paginated list of topics with optional case-insensitive name filtering.
    """
    result = service.list_topics(page=page, limit=limit, filter_by_name=filter_by_name)
    return Envelope(data=PageData[TopicSchema](
        items=[TopicSchema.model_validate(topic) for topic in result.items],
        total_entries=result.total_entries,
        total_pages=result.total_pages,
        current_page=result.pagination.page,
        items_per_page=result.pagination.limit,
    ))


@router.post("", response_model=Envelope[TopicSchema], status_code=status.HTTP_201_CREATED)
def create_topic(payload: TopicCreate, service: TopicService = Depends(get_topic_service)):
    topic = service.create(name=payload.name, description=payload.description)
    return Envelope(data=TopicSchema.model_validate(topic))


@router.get("/{topic_id}", response_model=Envelope[TopicSchema])
def get_topic(topic_id: str, service: TopicService = Depends(get_topic_service)):
    return Envelope(data=TopicSchema.model_validate(service.get(topic_id)))


@router.put("/{topic_id}", response_model=Envelope[TopicSchema])
def update_topic(topic_id: str, payload: TopicUpdate, service: TopicService = Depends(get_topic_service)):
    """
    Update a topic. Only the fields present in the body change.
    """
    topic = service.update(topic_id, payload.model_dump(exclude_unset=True))
    return Envelope(data=TopicSchema.model_validate(topic))


@router.delete("/{topic_id}", response_model=Envelope[None])
def delete_topic(topic_id: str, service: TopicService = Depends(get_topic_service)):
    """
    Delete a topic. Books that reference it are left untouched.
    """
    return Envelope(message=service.delete(topic_id))
