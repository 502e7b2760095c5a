# api/routes/books.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_book_service
from api.schemas import BookCreate, BookSchema, BookUpdate, Envelope, PageData
from core.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=Envelope[PageData[BookSchema]])
def get_books(
    page: Optional[int] = Query(None, ge=0, description="Page number"),
    limit: Optional[int] = Query(None, ge=0, description="Items per page"),
    filter_by_topic_name: Optional[str] = Query(None, alias="filterByTopicName", description="Filter Books by Topic Name"),
    service: BookService = Depends(get_book_service),
):
    """
    Get a paginated list of books with their topics populated.

    When ``filterByTopicName`` is given, only books referencing a topic whose
    name contains it (case-insensitive) are returned.
    """
    result = service.list_books(page=page, limit=limit, filter_by_topic_name=filter_by_topic_name)
    return Envelope(data=PageData[BookSchema](
        items=[BookSchema.model_validate(book) for book in result.items],
        total_entries=result.total_entries,
        total_pages=result.total_pages,
        current_page=result.pagination.page,
        items_per_page=result.pagination.limit,
    ))


@router.post("", response_model=Envelope[BookSchema], status_code=status.HTTP_201_CREATED)
def create_book(payload: BookCreate, service: BookService = Depends(get_book_service)):
    book = service.create(payload.model_dump())
    return Envelope(data=BookSchema.model_validate(book))


@router.get("/topic/{topic_id}", response_model=Envelope[List[BookSchema]])
def get_books_by_topic(topic_id: str, service: BookService = Depends(get_book_service)):
    """
    Get all books for a specific topic by Topic ID.
    """
    books = service.find_by_topic(topic_id)
    return Envelope(data=[BookSchema.model_validate(book) for book in books])


@router.get("/{book_id}", response_model=Envelope[BookSchema])
def get_book(book_id: str, service: BookService = Depends(get_book_service)):
    return Envelope(data=BookSchema.model_validate(service.get(book_id)))


@router.put("/{book_id}", response_model=Envelope[BookSchema])
def update_book(book_id: str, payload: BookUpdate, service: BookService = Depends(get_book_service)):
    """
    Update a book. Only the fields present in the body change; ``topics``
    replaces the stored list.
    """
    book = service.update(book_id, payload.model_dump(exclude_unset=True))
    return Envelope(data=BookSchema.model_validate(book))


@router.delete("/{book_id}", response_model=Envelope[None])
def delete_book(book_id: str, service: BookService = Depends(get_book_service)):
    return Envelope(message=service.delete(book_id))
