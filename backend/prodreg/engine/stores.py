"""
Snapshot holders for the reference lists and the registration history.

A store is never edited in place: replace_* returns a new store, and the
caller decides when to swap it in (after a re-fetch that follows a write).
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .filtering import category_label
from .types import Category, Product, Registration


@dataclass(frozen=True)
class ReferenceStore:
    users: tuple[str, ...] = ()
    products: tuple[Product, ...] = ()
    categories: tuple[Category, ...] = ()
    locations: tuple[str, ...] = ()
    purposes: tuple[str, ...] = ()

    def category_name(self, category_id: Optional[str]) -> Optional[str]:
        return category_label(category_id, self.categories)

    def find_product_by_name(self, name: str) -> Optional[Product]:
        return next((p for p in self.products if p.name == name), None)

    def find_product_by_qr(self, qr_code: str) -> Optional[Product]:
        """First product carrying the scanned code; codes are not guaranteed unique."""
        if not qr_code:
            return None
        return next((p for p in self.products if p.qr_code == qr_code), None)

    def replace_products(self, products) -> "ReferenceStore":
        return replace(self, products=tuple(products))

    def replace_categories(self, categories) -> "ReferenceStore":
        return replace(self, categories=tuple(categories))

    def replace_names(self, kind: str, names) -> "ReferenceStore":
        if kind not in {"users", "locations", "purposes"}:
            raise ValueError(f"Unknown name list: {kind}")
        return replace(self, **{kind: tuple(names)})


@dataclass(frozen=True)
class RegistrationStore:
    registrations: tuple[Registration, ...] = ()

    def __len__(self) -> int:
        return len(self.registrations)

    def __iter__(self):
        return iter(self.registrations)

    def replace_all(self, registrations) -> "RegistrationStore":
        return RegistrationStore(tuple(registrations))


SOURCE_DATABASE = "database"
SOURCE_DEMO = "demo"


@dataclass(frozen=True)
class Snapshot:
    reference: ReferenceStore
    registrations: RegistrationStore
    source: str = SOURCE_DATABASE
