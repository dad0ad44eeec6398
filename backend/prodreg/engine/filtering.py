"""
History filtering over registration snapshots.

All predicates are combined as a conjunction. Nothing here raises for bad
data: a missing qr_code is simply not searched, and a row whose timestamp
cannot be parsed falls back to its stored date.
"""
from __future__ import annotations

from typing import Iterable, Optional

from ..time_utils import calendar_date, is_calendar_date, try_parse_iso_datetime
from .types import Category, FilterCriteria, Product, Registration, UNKNOWN_CATEGORY


def _needle(text: Optional[str]) -> Optional[str]:
    if not text or not text.strip():
        return None
    return text.lower()


def registration_day(registration: Registration) -> Optional[str]:
    """Calendar day (UTC) of the registration's timestamp, or its stored date."""
    parsed = try_parse_iso_datetime(registration.timestamp)
    if parsed is not None:
        return calendar_date(parsed)
    if is_calendar_date(registration.date):
        return registration.date
    return None


def matches_search(registration: Registration, needle: str) -> bool:
    fields = [
        registration.user,
        registration.product,
        registration.location,
        registration.purpose,
    ]
    if registration.qr_code:
        fields.append(registration.qr_code)
    return any(needle in (value or "").lower() for value in fields)


def _in_range(day: Optional[str], date_from: Optional[str], date_to: Optional[str]) -> bool:
    if not date_from and not date_to:
        return True
    if day is None:
        return False
    # YYYY-MM-DD sorts lexicographically in calendar order
    if date_from and day < date_from:
        return False
    if date_to and day > date_to:
        return False
    return True


def filter_registrations(
    registrations: Iterable[Registration],
    criteria: FilterCriteria,
) -> list[Registration]:
    needle = _needle(criteria.search_text)

    result = []
    for registration in registrations:
        if needle is not None and not matches_search(registration, needle):
            continue
        if criteria.user is not None and registration.user != criteria.user:
            continue
        if criteria.location is not None and registration.location != criteria.location:
            continue
        if not _in_range(registration_day(registration), criteria.date_from, criteria.date_to):
            continue
        result.append(registration)
    return result


def filter_names(names: Iterable[str], search_text: Optional[str]) -> list[str]:
    """Case-insensitive substring filter for plain reference lists (user picker)."""
    needle = _needle(search_text)
    if needle is None:
        return list(names)
    return [name for name in names if needle in name.lower()]


def filter_products_for_picker(
    products: Iterable[Product],
    *,
    category_id: Optional[str] = None,
    query: Optional[str] = None,
) -> list[Product]:
    """
    Registration form product picker: optional category restriction, then a
    substring match on name or qr_code.
    """
    needle = _needle(query)
    result = []
    for product in products:
        if category_id is not None and product.category_id != category_id:
            continue
        if needle is not None:
            in_name = needle in product.name.lower()
            in_code = bool(product.qr_code) and needle in product.qr_code.lower()
            if not (in_name or in_code):
                continue
        result.append(product)
    return result


def search_products(
    products: Iterable[Product],
    categories: Iterable[Category],
    search_text: Optional[str],
) -> list[Product]:
    """Admin product search over name, qr_code and resolved category name."""
    needle = _needle(search_text)
    if needle is None:
        return list(products)

    names = {category.id: category.name for category in categories}
    result = []
    for product in products:
        category_name = ""
        if product.category_id:
            category_name = names.get(product.category_id, "")
        haystack = [product.name, product.qr_code or "", category_name]
        if any(needle in value.lower() for value in haystack):
            result.append(product)
    return result


def category_label(category_id: Optional[str], categories: Iterable[Category]) -> Optional[str]:
    """Display name for a product's category; dangling ids get the unknown label."""
    if not category_id:
        return None
    for category in categories:
        if category.id == category_id:
            return category.name
    return UNKNOWN_CATEGORY
