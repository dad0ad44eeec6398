"""
Snapshot types shared by the filter, sort and aggregation passes.

Snapshots are frozen: the engine borrows them for one computation and always
returns new lists, so callers can hand the same tuples to several passes.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


ALL = "all"
UNKNOWN_CATEGORY = "Onbekende categorie"


@dataclass(frozen=True)
class Category:
    id: str
    name: str


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    qr_code: Optional[str] = None
    category_id: Optional[str] = None
    created_at: Optional[str] = None
    attachment_url: Optional[str] = None
    attachment_name: Optional[str] = None


@dataclass(frozen=True)
class Registration:
    """One recorded use of a product. date/time are derived from timestamp (UTC)."""
    id: str
    user: str
    product: str
    location: str
    purpose: str
    timestamp: str
    date: str
    time: str
    qr_code: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user": self.user,
            "product": self.product,
            "location": self.location,
            "purpose": self.purpose,
            "timestamp": self.timestamp,
            "date": self.date,
            "time": self.time,
            "qr_code": self.qr_code,
        }


class _Choice(str, Enum):
    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value):
        """Strict conversion for request input; raises ValueError on unknown values."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


class SortKey(_Choice):
    DATE = "date"
    USER = "user"
    PRODUCT = "product"
    LOCATION = "location"

    @classmethod
    def coerce(cls, value) -> "SortKey":
        """Unrecognised keys sort by date."""
        try:
            return cls.parse(value)
        except ValueError:
            return cls.DATE


class SortOrder(_Choice):
    NEWEST = "newest"
    OLDEST = "oldest"

    @classmethod
    def coerce(cls, value) -> "SortOrder":
        try:
            return cls.parse(value)
        except ValueError:
            return cls.OLDEST


class Dimension(_Choice):
    USER = "user"
    PRODUCT = "product"
    LOCATION = "location"


def scope(value: Optional[str]) -> Optional[str]:
    """Map the "all" selector (or an empty value) to None; anything else is an exact name."""
    if value is None:
        return None
    if value == "" or value == ALL:
        return None
    return value


@dataclass(frozen=True)
class FilterCriteria:
    """
    History filter. user/location of None select every registration.
    date_from/date_to are inclusive YYYY-MM-DD bounds.
    """
    search_text: Optional[str] = None
    user: Optional[str] = None
    location: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None

    @classmethod
    def build(
        cls,
        *,
        search_text: Optional[str] = None,
        user: Optional[str] = None,
        location: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> "FilterCriteria":
        return cls(
            search_text=search_text or None,
            user=scope(user),
            location=scope(location),
            date_from=date_from or None,
            date_to=date_to or None,
        )


@dataclass(frozen=True)
class ChartSegment:
    product: str
    count: int
    color: str
    start_angle: float
    sweep_angle: float

    def to_dict(self) -> dict:
        return {
            "product": self.product,
            "count": self.count,
            "color": self.color,
            "start_angle": self.start_angle,
            "sweep_angle": self.sweep_angle,
        }
