"""
Historical sites API endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lichsu.api.events import period_filter
from lichsu.db.session import get_db
from lichsu.schemas import HistoricalSite, HistoricalSiteCreate, OperationResult, ReorderRequest
from lichsu.services import content_service, ordering_service
from lichsu.services.ordering_service import CollectionType

router = APIRouter()


@router.get("", response_model=list[HistoricalSite])
def list_historical_sites(
    period=Depends(period_filter),
    db: Session = Depends(get_db),
):
    return content_service.get_historical_sites(db, period)


@router.post("", response_model=HistoricalSite, status_code=201)
def create_historical_site(data: HistoricalSiteCreate, db: Session = Depends(get_db)):
    return content_service.create_historical_site(db, data)


@router.post("/reorder", response_model=OperationResult)
def reorder_historical_sites(request: ReorderRequest, db: Session = Depends(get_db)):
    ordering_service.reorder(db, CollectionType.SITES, request.ordered_ids, request.period_id)
    return OperationResult(message="Historical site order updated")
