"""
API Router - Aggregates all API endpoints.
"""
from fastapi import APIRouter

from lichsu.api import periods, event_types, events, figures, sites

api_router = APIRouter()

# Parent classification (ordering + guarded deletion)
api_router.include_router(periods.router, prefix="/periods", tags=["Periods"])

# Period-dependent content
api_router.include_router(events.router, prefix="/events", tags=["Events"])
api_router.include_router(figures.router, prefix="/historical-figures", tags=["Historical Figures"])
api_router.include_router(sites.router, prefix="/historical-sites", tags=["Historical Sites"])

api_router.include_router(event_types.router, prefix="/event-types", tags=["Event Types"])
