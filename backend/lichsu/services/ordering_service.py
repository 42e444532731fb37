"""
Ordering service - display order for every admin list.

Each ordered table keeps an integer sort_order. Values only need to be
comparable, not contiguous; reads always order by (sort_order, id).

Scopes:
- periods, event types: one flat collection each
- events, figures, sites: one group per period_id (NULL is its own group)

A reorder must name exactly the IDs of its scope. The whole batch is
written in one transaction, so readers never see a half-applied order.
"""
import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from lichsu.db.transaction import atomic
from lichsu.exceptions import ValidationError
from lichsu.models import Period, EventType, Event, HistoricalFigure, HistoricalSite

logger = logging.getLogger(__name__)


class CollectionType(str, Enum):
    PERIODS = "periods"
    EVENT_TYPES = "event-types"
    EVENTS = "events"
    FIGURES = "historical-figures"
    SITES = "historical-sites"


@dataclass(frozen=True)
class OrderedCollection:
    """An ordered table and whether it is grouped by period."""
    model: type
    grouped_by_period: bool = False


COLLECTIONS: dict[CollectionType, OrderedCollection] = {
    CollectionType.PERIODS: OrderedCollection(Period),
    CollectionType.EVENT_TYPES: OrderedCollection(EventType),
    CollectionType.EVENTS: OrderedCollection(Event, grouped_by_period=True),
    CollectionType.FIGURES: OrderedCollection(HistoricalFigure, grouped_by_period=True),
    CollectionType.SITES: OrderedCollection(HistoricalSite, grouped_by_period=True),
}


def _scope_query(db: Session, collection: OrderedCollection, period_id: Optional[int]):
    model = collection.model
    query = db.query(model)
    if collection.grouped_by_period:
        if period_id is None:
            query = query.filter(model.period_id.is_(None))
        else:
            query = query.filter(model.period_id == period_id)
    return query


def ordered(query, model):
    """Apply the canonical (sort_order, id) ordering."""
    return query.order_by(model.sort_order, model.id)


def next_sort_order(
    db: Session,
    collection_type: CollectionType,
    period_id: Optional[int] = None,
) -> int:
    """Order value that places a new row at the end of its scope."""
    collection = COLLECTIONS[collection_type]
    model = collection.model
    query = db.query(func.max(model.sort_order))
    if collection.grouped_by_period:
        if period_id is None:
            query = query.filter(model.period_id.is_(None))
        else:
            query = query.filter(model.period_id == period_id)
    current = query.scalar()
    return 0 if current is None else current + 1


def validate_order(ordered_ids: list[int], existing_ids: set[int]) -> None:
    """Raise ValidationError unless ordered_ids is a permutation of existing_ids."""
    counts = Counter(ordered_ids)
    duplicates = sorted(i for i, n in counts.items() if n > 1)
    if duplicates:
        raise ValidationError(f"Duplicate IDs in order: {duplicates}")

    seen = set(counts)
    unknown = sorted(seen - existing_ids)
    if unknown:
        raise ValidationError(f"IDs do not belong to this collection: {unknown}")

    missing = sorted(existing_ids - seen)
    if missing:
        raise ValidationError(f"Order must list every item, missing: {missing}")


def reorder(
    db: Session,
    collection_type: CollectionType,
    ordered_ids: list[int],
    period_id: Optional[int] = None,
) -> None:
    """
    Rewrite sort_order so that it follows ordered_ids (0-based index).

    All rows of the scope are locked for the batch; concurrent reorders
    of the same scope serialise and the last commit wins in full.
    """
    collection = COLLECTIONS[collection_type]

    with atomic(db, f"reorder {collection_type.value}"):
        if collection.grouped_by_period and period_id is not None:
            if db.query(Period.id).filter(Period.id == period_id).first() is None:
                raise ValidationError(f"Period {period_id} does not exist")

        # Same lock order as integrity_service._lock_periods
        model = collection.model
        rows = _scope_query(db, collection, period_id).order_by(model.id).with_for_update().all()
        by_id = {row.id: row for row in rows}
        validate_order(ordered_ids, set(by_id))

        changed = 0
        for index, item_id in enumerate(ordered_ids):
            row = by_id[item_id]
            if row.sort_order != index:
                row.sort_order = index
                changed += 1

    logger.info(
        "Reordered %s (period_id=%s): %d items, %d changed",
        collection_type.value,
        period_id if collection.grouped_by_period else "-",
        len(ordered_ids),
        changed,
    )
