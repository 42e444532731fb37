"""
Period service - CRUD operations for periods.

Deletion is not here: it goes through integrity_service, which guards
dependents.
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lichsu.exceptions import NotFoundError, ValidationError
from lichsu.models.period import Period
from lichsu.schemas.period import PeriodCreate, PeriodUpdate
from lichsu.services.ordering_service import CollectionType, next_sort_order, ordered
from lichsu.utils.slug import vietnamese_slugify

logger = logging.getLogger(__name__)


def get_periods(db: Session, visible_only: bool = False) -> list[Period]:
    """Get all periods in display order."""
    query = db.query(Period)
    if visible_only:
        query = query.filter(Period.is_show.is_(True))
    return ordered(query, Period).all()


def get_period_by_id(db: Session, period_id: int) -> Optional[Period]:
    """Get single period by ID."""
    return db.query(Period).filter(Period.id == period_id).first()


def get_period_by_slug(db: Session, slug: str) -> Optional[Period]:
    """Get single period by slug."""
    return db.query(Period).filter(Period.slug == slug).first()


def require_period(db: Session, period_id: int) -> Period:
    period = get_period_by_id(db, period_id)
    if not period:
        raise NotFoundError(f"Period {period_id} not found")
    return period


def _ensure_slug_free(db: Session, slug: str, period_id: Optional[int] = None) -> None:
    if not slug:
        raise ValidationError("Slug cannot be empty")
    existing = get_period_by_slug(db, slug)
    if existing and existing.id != period_id:
        raise ValidationError(f"Slug '{slug}' is already used by period {existing.id}")


def create_period(db: Session, data: PeriodCreate) -> Period:
    """Create a period at the end of the display order."""
    slug = data.slug or vietnamese_slugify(data.name)
    _ensure_slug_free(db, slug)

    period = Period(
        name=data.name,
        slug=slug,
        timeframe=data.timeframe,
        description=data.description,
        icon=data.icon,
        is_show=data.is_show,
        sort_order=next_sort_order(db, CollectionType.PERIODS),
    )
    db.add(period)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race on the unique slug
        db.rollback()
        raise ValidationError(f"Slug '{slug}' is already in use") from e
    db.refresh(period)

    logger.info("Created period %s (%s)", period.id, period.slug)
    return period


def update_period(db: Session, period_id: int, data: PeriodUpdate) -> Period:
    """Update editable fields. sort_order is owned by the reorder endpoint."""
    period = require_period(db, period_id)
    # Every period column is NOT NULL; an explicit null means "leave as is"
    changes = data.model_dump(exclude_unset=True, exclude_none=True)

    if "slug" in changes:
        _ensure_slug_free(db, changes["slug"], period_id)

    for field, value in changes.items():
        setattr(period, field, value)

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ValidationError("Period update violates a constraint") from e
    db.refresh(period)
    return period
