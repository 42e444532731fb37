"""
Integrity service - deleting periods without orphaning content.

Events, historical figures and historical sites point at a period through
a nullable period_id. The database has no ON DELETE CASCADE, so every
period deletion goes through this module:

    delete_period()        -> deletes only when nothing depends on the period,
                              otherwise raises ConflictError with the listing
    reassign_and_delete()  -> moves all dependents to another period, then deletes
    purge_and_delete()     -> deletes all dependents, then the period

Each of these runs in a single transaction. A failure leaves the period
and its dependents exactly as they were.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from lichsu.config import get_settings
from lichsu.db.transaction import atomic
from lichsu.exceptions import ConflictError, NotFoundError, ValidationError
from lichsu.models import Period, Event, HistoricalFigure, HistoricalSite, event_to_event_type
from lichsu.schemas import integrity as integrity_schemas
from lichsu.schemas import content as content_schemas
from lichsu.schemas.period import Period as PeriodSchema
from lichsu.services.ordering_service import CollectionType, next_sort_order, ordered

logger = logging.getLogger(__name__)

# (payload key, model, ordering scope) in the order they are processed
DEPENDENTS = (
    ("events", Event, CollectionType.EVENTS),
    ("figures", HistoricalFigure, CollectionType.FIGURES),
    ("sites", HistoricalSite, CollectionType.SITES),
)


@dataclass
class DependencyScan:
    """Result of scanning one period for content that references it."""
    period: Period
    events: list[Event] = field(default_factory=list)
    figures: list[HistoricalFigure] = field(default_factory=list)
    sites: list[HistoricalSite] = field(default_factory=list)
    available_periods: list[Period] = field(default_factory=list)

    @property
    def has_dependents(self) -> bool:
        return bool(self.events or self.figures or self.sites)

    def counts(self) -> dict[str, int]:
        return {"events": len(self.events), "figures": len(self.figures), "sites": len(self.sites)}

    def to_payload(self) -> integrity_schemas.ConflictPayload:
        return integrity_schemas.ConflictPayload(
            period_name=self.period.name,
            events=[content_schemas.Event.model_validate(e) for e in self.events],
            figures=[content_schemas.HistoricalFigure.model_validate(f) for f in self.figures],
            sites=[content_schemas.HistoricalSite.model_validate(s) for s in self.sites],
            available_periods=[PeriodSchema.model_validate(p) for p in self.available_periods],
        )


def _lock_periods(db: Session, period_ids: list[int]) -> dict[int, Period]:
    """Load and row-lock periods, always in id order to avoid deadlocks."""
    rows = (
        db.query(Period)
        .filter(Period.id.in_(period_ids))
        .order_by(Period.id)
        .with_for_update()
        .all()
    )
    return {p.id: p for p in rows}


def _check_deletable(period: Period) -> None:
    if period.slug in get_settings().protected_period_slugs:
        raise ValidationError(f"Period '{period.name}' is the default period and cannot be deleted")


def _scan(db: Session, period: Period) -> DependencyScan:
    groups = {
        name: ordered(db.query(model).filter(model.period_id == period.id), model).all()
        for name, model, _ in DEPENDENTS
    }
    available = ordered(db.query(Period).filter(Period.id != period.id), Period).all()
    return DependencyScan(period=period, available_periods=available, **groups)


def scan_dependents(db: Session, period_id: int) -> DependencyScan:
    """
    List the events, figures and sites that reference a period.

    Read-only. Also returns every other period (display order) as
    candidate reassignment targets. Empty groups are not an error.
    """
    period = db.query(Period).filter(Period.id == period_id).first()
    if not period:
        raise NotFoundError(f"Period {period_id} not found")
    return _scan(db, period)


def delete_period(db: Session, period_id: int) -> None:
    """
    Delete a period that nothing references.

    Raises ConflictError (carrying the full dependency listing) instead of
    deleting when any event, figure or site still points at the period.
    """
    with atomic(db, "delete period"):
        period = _lock_periods(db, [period_id]).get(period_id)
        if not period:
            raise NotFoundError(f"Period {period_id} not found")
        _check_deletable(period)

        scan = _scan(db, period)
        if scan.has_dependents:
            payload = scan.to_payload()
            logger.warning("Refused to delete period %s: dependents %s", period_id, scan.counts())
            raise ConflictError(
                f"Period '{period.name}' still has related content",
                payload=payload,
            )

        db.delete(period)

    logger.info("Deleted period %s", period_id)


def _move_group(db: Session, collection_type: CollectionType, rows: list, target: Period) -> int:
    """Point rows at target, appended after the target's existing group."""
    base = next_sort_order(db, collection_type, target.id)
    for offset, row in enumerate(rows):
        row.period_id = target.id
        row.sort_order = base + offset
        if isinstance(row, HistoricalFigure):
            row.period_text = target.name
    db.flush()
    return len(rows)


def reassign_and_delete(db: Session, period_id: int, target_period_id: Optional[int]) -> dict[str, int]:
    """
    Move every dependent of period_id to target_period_id, then delete period_id.

    Returns the number of moved rows per group.
    """
    if target_period_id is None:
        raise ValidationError("A target period is required")
    if target_period_id == period_id:
        raise ValidationError("Target period must differ from the period being deleted")

    with atomic(db, "reassign and delete period"):
        locked = _lock_periods(db, [period_id, target_period_id])
        source = locked.get(period_id)
        if not source:
            raise NotFoundError(f"Period {period_id} not found")
        _check_deletable(source)
        target = locked.get(target_period_id)
        if not target:
            raise ValidationError(f"Target period {target_period_id} does not exist")

        scan = _scan(db, source)
        moved = {
            name: _move_group(db, collection_type, getattr(scan, name), target)
            for name, _, collection_type in DEPENDENTS
        }

        db.delete(source)
        db.flush()

    logger.info("Deleted period %s after moving %s to period %s", period_id, moved, target_period_id)
    return moved


def purge_and_delete(db: Session, period_id: int) -> dict[str, int]:
    """
    Delete a period together with all of its events, figures and sites.

    Irreversible. Returns the number of deleted rows per group.
    """
    with atomic(db, "purge period content"):
        period = _lock_periods(db, [period_id]).get(period_id)
        if not period:
            raise NotFoundError(f"Period {period_id} not found")
        _check_deletable(period)

        # Event type links first, the association FKs may not cascade
        period_events = select(Event.id).where(Event.period_id == period_id)
        db.execute(delete(event_to_event_type).where(event_to_event_type.c.event_id.in_(period_events)))

        removed = {}
        for name, model, _ in DEPENDENTS:
            result = db.execute(delete(model).where(model.period_id == period_id))
            removed[name] = result.rowcount

        db.delete(period)
        db.flush()

    logger.info("Purged period %s with its content %s", period_id, removed)
    return removed


def reassign_entities(
    db: Session,
    new_period_id: int,
    event_ids: list[int],
    figure_ids: list[int],
    site_ids: list[int],
) -> dict[str, int]:
    """
    Move selected events, figures and sites to another period.

    All IDs must exist. Rows already in the target period are left alone.
    Nothing is deleted.
    """
    requested = {"events": event_ids, "figures": figure_ids, "sites": site_ids}
    if not any(requested.values()):
        raise ValidationError("Provide at least one event, figure or site ID")

    with atomic(db, "reassign entities"):
        target = _lock_periods(db, [new_period_id]).get(new_period_id)
        if not target:
            raise NotFoundError(f"Period {new_period_id} not found")

        moved = {}
        for name, model, collection_type in DEPENDENTS:
            ids = set(requested[name])
            if not ids:
                moved[name] = 0
                continue

            rows = ordered(db.query(model).filter(model.id.in_(ids)), model).all()
            missing = sorted(ids - {row.id for row in rows})
            if missing:
                raise ValidationError(f"Unknown {name} IDs: {missing}")

            rows = [row for row in rows if row.period_id != target.id]
            moved[name] = _move_group(db, collection_type, rows, target)

    logger.info("Moved %s to period %s", moved, new_period_id)
    return moved
