"""
History ordering.

Text columns use base-letter collation (Unicode Collation Algorithm, primary
strength): case and diacritics carry no weight, so "Émile" and "emile"
compare equal, "Ångström" sorts with "Angstrom", and letters without a
decomposition such as "Ø" and "Ł" sort next to "O" and "L". Dutch (the
deployment locale) has no tailoring beyond the root order at the primary
level, so the root table serves "nl".
"""
from __future__ import annotations

import unicodedata
from datetime import datetime
from functools import lru_cache
from typing import Callable, Iterable

from pyuca import Collator

from ..time_utils import try_parse_iso_datetime
from .types import Registration, SortKey, SortOrder


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def collation_key(value: str) -> tuple[int, ...]:
    """Primary weights only; secondary (accents) and tertiary (case) levels are dropped."""
    elements = _collator().collation_elements(unicodedata.normalize("NFD", value or ""))
    return tuple(element[0] for element in elements if element[0])


def _timestamp_key(registration: Registration) -> tuple[int, datetime]:
    parsed = try_parse_iso_datetime(registration.timestamp)
    # Unparsable timestamps sort before every real instant
    if parsed is None:
        return (0, datetime.min)
    return (1, parsed)


_KEYS: dict[SortKey, Callable[[Registration], object]] = {
    SortKey.DATE: _timestamp_key,
    SortKey.USER: lambda r: collation_key(r.user),
    SortKey.PRODUCT: lambda r: collation_key(r.product),
    SortKey.LOCATION: lambda r: collation_key(r.location),
}


def sort_registrations(
    registrations: Iterable[Registration],
    sort_by: SortKey | str = SortKey.DATE,
    order: SortOrder | str = SortOrder.NEWEST,
) -> list[Registration]:
    """
    Stable sort into a new list. NEWEST reverses the ascending order of the
    key; rows with equal keys keep their input order either way.
    """
    key = _KEYS[SortKey.coerce(sort_by)]
    descending = SortOrder.coerce(order) is SortOrder.NEWEST
    return sorted(registrations, key=key, reverse=descending)


def sort_names(names: Iterable[str]) -> list[str]:
    return sorted(names, key=collation_key)
