"""
Historical figures API endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lichsu.api.events import period_filter
from lichsu.db.session import get_db
from lichsu.schemas import HistoricalFigure, HistoricalFigureCreate, OperationResult, ReorderRequest
from lichsu.services import content_service, ordering_service
from lichsu.services.ordering_service import CollectionType

router = APIRouter()


@router.get("", response_model=list[HistoricalFigure])
def list_historical_figures(
    period=Depends(period_filter),
    db: Session = Depends(get_db),
):
    return content_service.get_historical_figures(db, period)


@router.post("", response_model=HistoricalFigure, status_code=201)
def create_historical_figure(data: HistoricalFigureCreate, db: Session = Depends(get_db)):
    return content_service.create_historical_figure(db, data)


@router.post("/reorder", response_model=OperationResult)
def reorder_historical_figures(request: ReorderRequest, db: Session = Depends(get_db)):
    """
    Save the order of figures within one period.

    `orderedIds` must be exactly the figures whose period is `periodId`.
    """
    ordering_service.reorder(db, CollectionType.FIGURES, request.ordered_ids, request.period_id)
    return OperationResult(message="Historical figure order updated")
