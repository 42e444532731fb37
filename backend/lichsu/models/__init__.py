"""
SQLAlchemy models for LICHSU.
"""
from lichsu.models.base import Base
from lichsu.models.period import Period
from lichsu.models.event import Event, EventType, event_to_event_type
from lichsu.models.figure import HistoricalFigure
from lichsu.models.site import HistoricalSite

__all__ = [
    "Base",
    "Period",
    "Event",
    "EventType",
    "event_to_event_type",
    "HistoricalFigure",
    "HistoricalSite",
]
