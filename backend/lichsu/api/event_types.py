"""
Event types API endpoints.

Event types (battle, uprising, dynasty change...) are a flat, globally
ordered list.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lichsu.db.session import get_db
from lichsu.schemas import EventType, EventTypeCreate, OperationResult, ReorderRequest
from lichsu.services import content_service, ordering_service
from lichsu.services.ordering_service import CollectionType

router = APIRouter()


@router.get("", response_model=list[EventType])
def list_event_types(db: Session = Depends(get_db)):
    return content_service.get_event_types(db)


@router.post("", response_model=EventType, status_code=201)
def create_event_type(data: EventTypeCreate, db: Session = Depends(get_db)):
    return content_service.create_event_type(db, data)


@router.post("/reorder", response_model=OperationResult)
def reorder_event_types(request: ReorderRequest, db: Session = Depends(get_db)):
    """Save the order of event types. `orderedIds` must list every event type."""
    ordering_service.reorder(db, CollectionType.EVENT_TYPES, request.ordered_ids)
    return OperationResult(message="Event type order updated")
