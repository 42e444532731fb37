"""
Historical figure model.
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from lichsu.models.base import Base, TimestampMixin


class HistoricalFigure(Base, TimestampMixin):
    __tablename__ = "historical_figures"

    id = Column(Integer, primary_key=True, index=True)
    period_id = Column(Integer, ForeignKey("periods.id"), index=True)

    name = Column(String(200), nullable=False)
    slug = Column(String(200), index=True)

    # Legacy denormalised period name, kept in step with period_id
    period_text = Column(String(200))

    lifespan = Column(String(100), nullable=False, default="")  # "1228 - 1300"
    description = Column(Text, nullable=False, default="")
    image_url = Column(String(500))

    sort_order = Column(Integer, nullable=False, default=0)

    period = relationship("Period")

    def __repr__(self):
        return f"<HistoricalFigure(id={self.id}, name='{self.name}', period_id={self.period_id})>"
