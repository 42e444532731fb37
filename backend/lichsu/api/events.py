"""
Events API endpoints.

Events are ordered within their period. Reordering therefore names the
period group (`periodId`, null for unclassified events) together with
every event ID of that group.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from lichsu.db.session import get_db
from lichsu.schemas import Event, EventCreate, OperationResult, ReorderRequest
from lichsu.services import content_service, ordering_service
from lichsu.services.ordering_service import CollectionType

router = APIRouter()


def period_filter(
    period_id: Optional[int] = Query(None, alias="periodId", description="Only this period's group"),
    unclassified: bool = Query(False, description="Only items without a period"),
):
    """Shared list filter for period-grouped collections."""
    if unclassified:
        return None
    if period_id is not None:
        return period_id
    return content_service.ALL_PERIODS


@router.get("", response_model=list[Event])
def list_events(
    period=Depends(period_filter),
    db: Session = Depends(get_db),
):
    """List events, grouped by period and in display order."""
    return content_service.get_events(db, period)


@router.post("", response_model=Event, status_code=201)
def create_event(data: EventCreate, db: Session = Depends(get_db)):
    """Create an event at the end of its period group."""
    return content_service.create_event(db, data)


@router.post("/reorder", response_model=OperationResult)
def reorder_events(request: ReorderRequest, db: Session = Depends(get_db)):
    ordering_service.reorder(db, CollectionType.EVENTS, request.ordered_ids, request.period_id)
    return OperationResult(message="Event order updated")
