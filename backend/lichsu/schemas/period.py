"""
Period schemas for API validation.
"""
from typing import Optional
from datetime import datetime

from pydantic import Field

from lichsu.schemas.common import CamelModel


class PeriodBase(CamelModel):
    """Base schema with common fields."""
    name: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    timeframe: str = Field("", max_length=100)
    description: str = ""
    icon: str = Field("", max_length=50)
    is_show: bool = True


class PeriodCreate(PeriodBase):
    """Schema for creating a new period (slug derived from name when omitted)."""
    pass


class PeriodUpdate(CamelModel):
    """Schema for updating a period (all fields optional).

    sort_order is absent on purpose: it is only written by the reorder endpoint.
    """
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    timeframe: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=50)
    is_show: Optional[bool] = None


class Period(PeriodBase):
    """Schema for reading a period."""
    id: int
    slug: str
    sort_order: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
