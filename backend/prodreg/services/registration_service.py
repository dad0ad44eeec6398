# Overview: Service-layer operations for recording and reviewing registrations.

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..extensions import db
from ..models import Registration
from ..time_utils import calendar_date, clock_time, utcnow
from ..validation import ValidationError
from ..engine import FilterCriteria, SortKey, SortOrder, filter_registrations, sort_registrations
from . import snapshot_service


REQUIRED_FIELDS = ("user", "product", "location", "purpose")


def record_registration(payload: dict, *, now: Optional[datetime] = None) -> dict:
    """
    Record that a user took a product to a location for a purpose.

    The server stamps the instant; date and time are derived from it so the
    three always agree. The product's current qr_code is copied onto the row.

    Raises:
        ValidationError: a required field is missing or blank
    """
    if not isinstance(payload, dict):
        raise ValidationError("Invalid JSON payload")

    values = {}
    missing = []
    for field in REQUIRED_FIELDS:
        raw = payload.get(field)
        value = raw.strip() if isinstance(raw, str) else ""
        if not value:
            missing.append(field)
        values[field] = value
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    occurred_at = now or utcnow()
    product = snapshot_service.load_reference_store().find_product_by_name(values["product"])

    registration = Registration(
        user_name=values["user"],
        product_name=values["product"],
        location=values["location"],
        purpose=values["purpose"],
        occurred_at=occurred_at,
        date=calendar_date(occurred_at),
        time=clock_time(occurred_at),
        qr_code=product.qr_code if product else None,
    )
    db.session.add(registration)
    db.session.commit()
    return registration.to_dict()


def list_history(
    criteria: FilterCriteria,
    sort_by: SortKey = SortKey.DATE,
    order: SortOrder = SortOrder.NEWEST,
) -> dict:
    """Filter, then sort, the full registration history."""
    snapshot = snapshot_service.load_snapshot()
    filtered = filter_registrations(snapshot.registrations, criteria)
    ordered = sort_registrations(filtered, sort_by, order)
    return {
        "items": [r.to_dict() for r in ordered],
        "count": len(ordered),
        "total": len(snapshot.registrations),
        "sort_by": SortKey.coerce(sort_by).value,
        "order": SortOrder.coerce(order).value,
        "source": snapshot.source,
    }
