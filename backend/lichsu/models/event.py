"""
Event and EventType models.

Events belong to at most one period (NULL = unclassified) and may be
tagged with any number of event types (battle, dynasty change, uprising...).
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey, Table
from sqlalchemy.orm import relationship

from lichsu.models.base import Base, TimestampMixin

# Event <-> EventType
event_to_event_type = Table(
    "event_to_event_type",
    Base.metadata,
    Column("event_id", Integer, ForeignKey("events.id", ondelete="CASCADE"), primary_key=True),
    Column("event_type_id", Integer, ForeignKey("event_types.id", ondelete="CASCADE"), primary_key=True),
)


class EventType(Base, TimestampMixin):
    __tablename__ = "event_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(Text)
    color = Column(String(7), default="#C62828")  # HEX color for badges
    sort_order = Column(Integer, nullable=False, default=0)

    events = relationship("Event", secondary=event_to_event_type, back_populates="event_types")

    def __repr__(self):
        return f"<EventType(id={self.id}, slug='{self.slug}')>"


class Event(Base, TimestampMixin):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    period_id = Column(Integer, ForeignKey("periods.id"), index=True)

    title = Column(String(500), nullable=False)
    slug = Column(String(500), index=True)
    description = Column(Text, nullable=False, default="")
    year = Column(String(100), nullable=False, default="")  # "938", "1418 - 1427"
    image_url = Column(String(500))

    # Scoped to the period group
    sort_order = Column(Integer, nullable=False, default=0)

    period = relationship("Period")
    event_types = relationship("EventType", secondary=event_to_event_type, back_populates="events")

    def __repr__(self):
        return f"<Event(id={self.id}, title='{self.title}', period_id={self.period_id})>"
