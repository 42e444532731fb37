"""
Period model.

A historical era of Vietnam (e.g. "Thời kỳ Bắc thuộc", "Nhà Trần").
Periods are the parent classification for events, figures and sites.
They carry no foreign key of their own and deliberately declare no
collection relationships: deleting a period never touches dependents
through the ORM, only through the integrity service.
"""
from sqlalchemy import Column, Integer, String, Text, Boolean

from lichsu.models.base import Base, TimestampMixin


class Period(Base, TimestampMixin):
    __tablename__ = "periods"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    slug = Column(String(200), unique=True, nullable=False, index=True)

    # Free-form span shown to visitors, e.g. "938 - 1009"
    timeframe = Column(String(100), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    icon = Column(String(50), nullable=False, default="")

    # Shown on the public home page
    is_show = Column(Boolean, nullable=False, default=True)

    sort_order = Column(Integer, nullable=False, default=0, index=True)

    def __repr__(self):
        return f"<Period(id={self.id}, name='{self.name}', sort_order={self.sort_order})>"
