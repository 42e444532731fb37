"""
Historical site model.

Temples, citadels, battlefields and relic sites, optionally tied to a period.
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from lichsu.models.base import Base, TimestampMixin


class HistoricalSite(Base, TimestampMixin):
    __tablename__ = "historical_sites"

    id = Column(Integer, primary_key=True, index=True)
    period_id = Column(Integer, ForeignKey("periods.id"), index=True)

    name = Column(String(200), nullable=False)
    slug = Column(String(200), index=True)
    location = Column(String(200), nullable=False, default="")  # Province / city
    address = Column(String(500))
    description = Column(Text, nullable=False, default="")
    image_url = Column(String(500))

    sort_order = Column(Integer, nullable=False, default=0)

    period = relationship("Period")

    def __repr__(self):
        return f"<HistoricalSite(id={self.id}, name='{self.name}', period_id={self.period_id})>"
