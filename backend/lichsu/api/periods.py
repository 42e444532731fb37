"""
Periods API endpoints.

Admin management of historical periods: listing, editing, drag-and-drop
ordering and guarded deletion.

Deleting a period that still has events, figures or sites returns 400
with the full listing in `data`. The admin UI then lets the operator
either reassign that content (`/{id}/reassign`) or delete it together
with the period (`/{id}/delete-content`).
"""
from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session

from lichsu.db.session import get_db
from lichsu.exceptions import NotFoundError
from lichsu.schemas import (
    DependentCounts,
    EntityReassignRequest,
    OperationResult,
    Period,
    PeriodCreate,
    PeriodUpdate,
    PurgeResponse,
    ReassignRequest,
    ReassignResponse,
    RelatedEntitiesResponse,
)
from lichsu.services import integrity_service, ordering_service, period_service
from lichsu.services.ordering_service import CollectionType

router = APIRouter()


@router.get("", response_model=list[Period])
def list_periods(
    visible: bool = Query(False, description="Only periods shown on the home page"),
    db: Session = Depends(get_db),
):
    """List periods in display order."""
    return period_service.get_periods(db, visible_only=visible)


@router.post("", response_model=Period, status_code=201)
def create_period(data: PeriodCreate, db: Session = Depends(get_db)):
    """Create a period at the end of the list. The slug defaults to the name without diacritics."""
    return period_service.create_period(db, data)


@router.post("/sort", response_model=OperationResult)
def sort_periods(
    ordered_ids: list[int] = Body(..., description="Every period ID, in the desired order"),
    db: Session = Depends(get_db),
):
    """
    Save the drag-and-drop order of periods.

    The body is the complete list of period IDs; partial lists are rejected.
    """
    ordering_service.reorder(db, CollectionType.PERIODS, ordered_ids)
    return OperationResult(message="Period order updated")


@router.post("/reassign-entities", response_model=ReassignResponse)
def reassign_entities(request: EntityReassignRequest, db: Session = Depends(get_db)):
    """Move selected events, figures and sites to another period."""
    moved = integrity_service.reassign_entities(
        db,
        request.new_period_id,
        event_ids=request.event_ids,
        figure_ids=request.figure_ids,
        site_ids=request.site_ids,
    )
    return ReassignResponse(message="Content moved to the new period", moved=DependentCounts(**moved))


@router.get("/slug/{slug}", response_model=Period)
def get_period_by_slug(slug: str, db: Session = Depends(get_db)):
    period = period_service.get_period_by_slug(db, slug)
    if not period:
        raise NotFoundError(f"Period '{slug}' not found")
    return period


@router.get("/{period_id}", response_model=Period)
def get_period(period_id: int, db: Session = Depends(get_db)):
    return period_service.require_period(db, period_id)


@router.put("/{period_id}", response_model=Period)
def update_period(period_id: int, data: PeriodUpdate, db: Session = Depends(get_db)):
    return period_service.update_period(db, period_id, data)


@router.delete("/{period_id}", response_model=OperationResult)
def delete_period(period_id: int, db: Session = Depends(get_db)):
    """
    Delete a period that has no related content.

    Responds 400 with `data` = {periodName, events, figures, sites,
    availablePeriods} when content still references the period.
    """
    integrity_service.delete_period(db, period_id)
    return OperationResult(message="Period deleted")


@router.get("/{period_id}/related-entities", response_model=RelatedEntitiesResponse)
def get_related_entities(period_id: int, db: Session = Depends(get_db)):
    """Content referencing the period, plus the other periods it could move to."""
    scan = integrity_service.scan_dependents(db, period_id)
    return RelatedEntitiesResponse(data=scan.to_payload())


@router.post("/{period_id}/reassign", response_model=ReassignResponse)
def reassign_and_delete(
    period_id: int,
    request: ReassignRequest,
    db: Session = Depends(get_db),
):
    """Move all related content to `targetPeriodId`, then delete the period."""
    moved = integrity_service.reassign_and_delete(db, period_id, request.target_period_id)
    return ReassignResponse(message="Content reassigned and period deleted", moved=DependentCounts(**moved))


@router.post("/{period_id}/delete-content", response_model=PurgeResponse)
def purge_and_delete(period_id: int, db: Session = Depends(get_db)):
    """Delete the period together with all of its events, figures and sites."""
    removed = integrity_service.purge_and_delete(db, period_id)
    return PurgeResponse(message="Period and its content deleted", removed=DependentCounts(**removed))
