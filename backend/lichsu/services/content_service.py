"""
Content service - events, historical figures, historical sites, event types.

The only write path here is creating a single row. A row may point at
NULL or at an existing period, and is appended to the end of its group.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from lichsu.db.transaction import atomic
from lichsu.exceptions import ValidationError
from lichsu.models import Event, EventType, HistoricalFigure, HistoricalSite, Period
from lichsu.schemas.content import (
    EventCreate,
    EventTypeCreate,
    HistoricalFigureCreate,
    HistoricalSiteCreate,
)
from lichsu.services.ordering_service import CollectionType, next_sort_order, ordered
from lichsu.utils.slug import vietnamese_slugify

logger = logging.getLogger(__name__)

# Sentinel for "no period filter" (None already means the unclassified group)
ALL_PERIODS = object()


def _resolve_period(db: Session, period_id: Optional[int]) -> Optional[Period]:
    if period_id is None:
        return None
    period = db.query(Period).filter(Period.id == period_id).first()
    if not period:
        raise ValidationError(f"Period {period_id} does not exist")
    return period


def _list(db: Session, model, period_id=ALL_PERIODS) -> list:
    query = db.query(model)
    if period_id is ALL_PERIODS:
        return query.order_by(model.period_id, model.sort_order, model.id).all()
    if period_id is None:
        query = query.filter(model.period_id.is_(None))
    else:
        query = query.filter(model.period_id == period_id)
    return ordered(query, model).all()


# ---------------------------------------------------------------------------
# Event types
# ---------------------------------------------------------------------------

def get_event_types(db: Session) -> list[EventType]:
    return ordered(db.query(EventType), EventType).all()


def create_event_type(db: Session, data: EventTypeCreate) -> EventType:
    slug = data.slug or vietnamese_slugify(data.name, max_length=100)
    if db.query(EventType).filter(EventType.slug == slug).first():
        raise ValidationError(f"Event type slug '{slug}' already exists")

    with atomic(db, "create event type"):
        event_type = EventType(
            name=data.name,
            slug=slug,
            description=data.description,
            color=data.color,
            sort_order=next_sort_order(db, CollectionType.EVENT_TYPES),
        )
        db.add(event_type)
    return event_type


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

def get_events(db: Session, period_id=ALL_PERIODS) -> list[Event]:
    """Events grouped by period, in display order within each group."""
    return _list(db, Event, period_id)


def create_event(db: Session, data: EventCreate) -> Event:
    with atomic(db, "create event"):
        period = _resolve_period(db, data.period_id)

        event_types = []
        if data.event_type_ids:
            wanted = set(data.event_type_ids)
            event_types = db.query(EventType).filter(EventType.id.in_(wanted)).all()
            missing = sorted(wanted - {t.id for t in event_types})
            if missing:
                raise ValidationError(f"Unknown event type IDs: {missing}")

        event = Event(
            period_id=period.id if period else None,
            title=data.title,
            slug=vietnamese_slugify(data.title, max_length=500),
            description=data.description,
            year=data.year,
            image_url=data.image_url,
            sort_order=next_sort_order(db, CollectionType.EVENTS, data.period_id),
            event_types=event_types,
        )
        db.add(event)

    logger.info("Created event %s in period %s", event.id, event.period_id)
    return event


# ---------------------------------------------------------------------------
# Historical figures
# ---------------------------------------------------------------------------

def get_historical_figures(db: Session, period_id=ALL_PERIODS) -> list[HistoricalFigure]:
    return _list(db, HistoricalFigure, period_id)


def create_historical_figure(db: Session, data: HistoricalFigureCreate) -> HistoricalFigure:
    with atomic(db, "create historical figure"):
        period = _resolve_period(db, data.period_id)
        figure = HistoricalFigure(
            period_id=period.id if period else None,
            period_text=period.name if period else None,
            name=data.name,
            slug=vietnamese_slugify(data.name),
            lifespan=data.lifespan,
            description=data.description,
            image_url=data.image_url,
            sort_order=next_sort_order(db, CollectionType.FIGURES, data.period_id),
        )
        db.add(figure)

    logger.info("Created historical figure %s in period %s", figure.id, figure.period_id)
    return figure


# ---------------------------------------------------------------------------
# Historical sites
# ---------------------------------------------------------------------------

def get_historical_sites(db: Session, period_id=ALL_PERIODS) -> list[HistoricalSite]:
    return _list(db, HistoricalSite, period_id)


def create_historical_site(db: Session, data: HistoricalSiteCreate) -> HistoricalSite:
    with atomic(db, "create historical site"):
        period = _resolve_period(db, data.period_id)
        site = HistoricalSite(
            period_id=period.id if period else None,
            name=data.name,
            slug=vietnamese_slugify(data.name),
            location=data.location,
            address=data.address,
            description=data.description,
            image_url=data.image_url,
            sort_order=next_sort_order(db, CollectionType.SITES, data.period_id),
        )
        db.add(site)

    logger.info("Created historical site %s in period %s", site.id, site.period_id)
    return site
