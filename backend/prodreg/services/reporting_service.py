# Overview: Service-layer operations for dashboard statistics.

from __future__ import annotations

from flask import current_app

from ..engine import Dimension, product_chart_data, recent_activity, top_n
from . import snapshot_service


MAX_LIMIT = 100


class ReportError(Exception):
    """Raised when report parameters are invalid."""
    pass


def _check_limit(limit: int) -> int:
    if limit < 1 or limit > MAX_LIMIT:
        raise ReportError(f"limit must be between 1 and {MAX_LIMIT}")
    return limit


def _ranking(rows: list[tuple[str, int]]) -> list[dict]:
    return [{"name": name, "count": count} for name, count in rows]


def top_report(*, dimension: str, limit: int) -> dict:
    try:
        dim = Dimension.parse(dimension)
    except ValueError:
        raise ReportError(f"dimension must be one of: {', '.join(Dimension.values())}")
    _check_limit(limit)

    snapshot = snapshot_service.load_snapshot()
    return {
        "dimension": dim.value,
        "limit": limit,
        "rows": _ranking(top_n(snapshot.registrations, dim, limit)),
        "source": snapshot.source,
    }


def statistics(*, limit: int | None = None) -> dict:
    """
    Everything the statistics tab shows: top users, products and locations,
    the product pie chart and the most recent registrations.
    """
    if limit is None:
        limit = current_app.config.get("STATISTICS_TOP_N", 5)
    _check_limit(limit)
    recent_limit = current_app.config.get("RECENT_ACTIVITY_LIMIT", 10)

    snapshot = snapshot_service.load_snapshot()
    registrations = snapshot.registrations.registrations
    return {
        "total_registrations": len(registrations),
        "top_users": _ranking(top_n(registrations, Dimension.USER, limit)),
        "top_products": _ranking(top_n(registrations, Dimension.PRODUCT, limit)),
        "top_locations": _ranking(top_n(registrations, Dimension.LOCATION, limit)),
        "product_chart": [segment.to_dict() for segment in product_chart_data(registrations)],
        "recent_activity": [r.to_dict() for r in recent_activity(registrations, recent_limit)],
        "source": snapshot.source,
    }
