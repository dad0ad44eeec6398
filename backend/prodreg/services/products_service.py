# backend/prodreg/services/products_service.py
"""
Products Service

Reads go through a fresh snapshot so the admin search and the registration
product picker run the same engine passes as the history view. Writes commit
immediately; the next read re-fetches.
"""
from __future__ import annotations

import re
import time
from typing import Optional

from ..extensions import db
from ..models import Category, Product
from ..validation import ValidationError
from ..engine import filter_products_for_picker, search_products
from ..engine.types import Product as ProductSnapshot
from . import snapshot_service
from .reference_service import ReferenceNotFound

PRODUCT_MUTABLE_FIELDS = {"name", "qr_code", "category_id", "attachment_url", "attachment_name"}

QR_PREFIX_LENGTH = 10
QR_SUFFIX_DIGITS = 6


def apply_product_patch(p: Product, patch: dict) -> None:
    for k, v in patch.items():
        if k not in PRODUCT_MUTABLE_FIELDS:
            continue
        setattr(p, k, v)


def _with_category(product: ProductSnapshot, reference) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "qr_code": product.qr_code,
        "category_id": product.category_id,
        "category_name": reference.category_name(product.category_id),
        "attachment_url": product.attachment_url,
        "attachment_name": product.attachment_name,
        "created_at": product.created_at,
    }


def _require_category(category_id: Optional[int]) -> None:
    if category_id is None:
        return
    if db.session.query(Category).filter(Category.id == category_id).first() is None:
        raise ValidationError("category_id does not match a category")


def _get_product(product_id: int) -> Product:
    p = db.session.query(Product).filter(Product.id == product_id).first()
    if p is None:
        raise ReferenceNotFound("Product not found")
    return p


def list_products(
    search: Optional[str] = None,
    category_id: Optional[str] = None,
    q: Optional[str] = None,
) -> dict:
    """
    List products.

    Args:
        search: admin search over name, qr_code and category name
        category_id: picker restriction to one category ("all" for none)
        q: picker search over name and qr_code

    Returns:
        Dict with 'items', 'count', 'total' and the snapshot 'source'.
    """
    snapshot = snapshot_service.load_snapshot()
    reference = snapshot.reference

    products = search_products(reference.products, reference.categories, search)
    if category_id not in (None, "", "all") or q:
        products = filter_products_for_picker(
            products,
            category_id=None if category_id in (None, "", "all") else str(category_id),
            query=q,
        )

    items = [_with_category(p, reference) for p in products]
    return {
        "items": items,
        "count": len(items),
        "total": len(reference.products),
        "source": snapshot.source,
    }


def lookup_by_qr(qr_code: str) -> dict:
    """
    Scan-to-product lookup: the first product whose qr_code matches exactly.

    Raises:
        ReferenceNotFound: no product carries the code
    """
    snapshot = snapshot_service.load_snapshot()
    product = snapshot.reference.find_product_by_qr(qr_code)
    if product is None:
        raise ReferenceNotFound(f"No product found for QR code: {qr_code}")
    return _with_category(product, snapshot.reference)


def create_product(*, patch: dict) -> dict:
    """
    Create product using a validated patch dict.

    Raises:
        ValidationError: name missing or category_id unknown
    """
    if not patch.get("name"):
        raise ValidationError("name is required")
    _require_category(patch.get("category_id"))

    p = Product()
    apply_product_patch(p, patch)
    db.session.add(p)
    db.session.commit()
    return p.to_dict()


def update_product(*, product_id: int, patch: dict) -> dict:
    """
    Update a product. A patch that changes nothing leaves the row untouched.

    Raises:
        ReferenceNotFound: product does not exist
        ValidationError: category_id unknown
    """
    p = _get_product(product_id)

    changes = {k: v for k, v in patch.items() if k in PRODUCT_MUTABLE_FIELDS and getattr(p, k) != v}
    if not changes:
        return p.to_dict()

    if "category_id" in changes:
        _require_category(changes["category_id"])

    apply_product_patch(p, changes)
    db.session.commit()
    return p.to_dict()


def delete_product(*, product_id: int) -> None:
    p = _get_product(product_id)
    db.session.delete(p)
    db.session.commit()


def make_qr_code(name: str, now_ms: Optional[int] = None) -> str:
    """
    Label code for a product: the name without whitespace, first ten
    characters upper-cased, then the last six digits of the epoch millis.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    prefix = re.sub(r"\s+", "", name)[:QR_PREFIX_LENGTH].upper()
    suffix = str(now_ms)[-QR_SUFFIX_DIGITS:]
    return f"{prefix}_{suffix}"


def generate_qr_code(*, product_id: int, now_ms: Optional[int] = None) -> dict:
    p = _get_product(product_id)
    p.qr_code = make_qr_code(p.name, now_ms)
    db.session.commit()
    return p.to_dict()
