"""Pydantic schemas for API request/response validation."""
from lichsu.schemas.common import CamelModel, OperationResult
from lichsu.schemas.period import Period, PeriodCreate, PeriodUpdate
from lichsu.schemas.content import (
    Event, EventCreate,
    EventType, EventTypeCreate,
    HistoricalFigure, HistoricalFigureCreate,
    HistoricalSite, HistoricalSiteCreate,
)
from lichsu.schemas.integrity import (
    ConflictPayload,
    DependentCounts,
    EntityReassignRequest,
    PurgeResponse,
    ReassignRequest,
    ReassignResponse,
    RelatedEntitiesResponse,
    ReorderRequest,
)

__all__ = [
    "CamelModel", "OperationResult",
    "Period", "PeriodCreate", "PeriodUpdate",
    "Event", "EventCreate",
    "EventType", "EventTypeCreate",
    "HistoricalFigure", "HistoricalFigureCreate",
    "HistoricalSite", "HistoricalSiteCreate",
    "ConflictPayload", "DependentCounts", "EntityReassignRequest",
    "PurgeResponse", "ReassignRequest", "ReassignResponse",
    "RelatedEntitiesResponse", "ReorderRequest",
]
