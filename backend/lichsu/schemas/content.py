"""Schemas for period-dependent content: events, figures, sites, event types."""
from typing import Optional

from pydantic import Field

from lichsu.schemas.common import CamelModel


class EventTypeCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    color: str = Field("#C62828", pattern=r"^#[0-9A-Fa-f]{6}$")


class EventType(EventTypeCreate):
    id: int
    slug: str
    sort_order: int


class EventCreate(CamelModel):
    period_id: Optional[int] = None
    title: str = Field(..., min_length=1, max_length=500)
    description: str = ""
    year: str = Field("", max_length=100)
    image_url: Optional[str] = None
    event_type_ids: list[int] = []


class Event(CamelModel):
    """Event as listed in admin tables and conflict payloads."""
    id: int
    period_id: Optional[int] = None
    title: str
    slug: Optional[str] = None
    description: str = ""
    year: str = ""
    image_url: Optional[str] = None
    sort_order: int


class HistoricalFigureCreate(CamelModel):
    period_id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=200)
    lifespan: str = Field("", max_length=100)
    description: str = ""
    image_url: Optional[str] = None


class HistoricalFigure(CamelModel):
    id: int
    period_id: Optional[int] = None
    period_text: Optional[str] = None
    name: str
    slug: Optional[str] = None
    lifespan: str = ""
    description: str = ""
    image_url: Optional[str] = None
    sort_order: int


class HistoricalSiteCreate(CamelModel):
    period_id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=200)
    location: str = Field("", max_length=200)
    address: Optional[str] = None
    description: str = ""
    image_url: Optional[str] = None


class HistoricalSite(CamelModel):
    id: int
    period_id: Optional[int] = None
    name: str
    slug: Optional[str] = None
    location: str = ""
    address: Optional[str] = None
    description: str = ""
    image_url: Optional[str] = None
    sort_order: int
