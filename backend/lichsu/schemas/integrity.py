"""
Request/response schemas for ordering and period deletion.

Every mutation endpoint gets its own request type so that malformed
bodies are rejected before the database is touched.
"""
from typing import Optional

from pydantic import Field

from lichsu.schemas.common import CamelModel, OperationResult
from lichsu.schemas.period import Period
from lichsu.schemas.content import Event, HistoricalFigure, HistoricalSite


class ReorderRequest(CamelModel):
    """Complete ordered ID list for one collection scope.

    period_id selects the group for events, figures and sites
    (null = unclassified); it is ignored for periods and event types.
    """
    ordered_ids: list[int]
    period_id: Optional[int] = None


class ReassignRequest(CamelModel):
    # Optional so that a missing target is reported as a 400 by the service
    target_period_id: Optional[int] = None


class EntityReassignRequest(CamelModel):
    new_period_id: int
    event_ids: list[int] = []
    figure_ids: list[int] = []
    site_ids: list[int] = []


class ConflictPayload(CamelModel):
    """Everything the UI needs to resolve a blocked deletion in one round trip."""
    period_name: str
    events: list[Event] = []
    figures: list[HistoricalFigure] = []
    sites: list[HistoricalSite] = []
    available_periods: list[Period] = []


class RelatedEntitiesResponse(CamelModel):
    success: bool = True
    data: ConflictPayload


class DependentCounts(CamelModel):
    events: int = 0
    figures: int = 0
    sites: int = 0


class ReassignResponse(OperationResult):
    moved: DependentCounts = Field(default_factory=DependentCounts)


class PurgeResponse(OperationResult):
    removed: DependentCounts = Field(default_factory=DependentCounts)
