# Overview: Loads the built-in demonstration dataset into the database.

from __future__ import annotations

from ..extensions import db
from ..models import Category, Location, Product, Purpose, Registration, User
from ..time_utils import parse_iso_datetime
from ..engine.demo_data import demo_snapshot


def _ensure_names(model, names) -> int:
    existing = {name for (name,) in db.session.query(model.name).all()}
    created = 0
    for name in names:
        if name in existing:
            continue
        db.session.add(model(name=name))
        existing.add(name)
        created += 1
    return created


def seed_demo_data() -> dict:
    """
    Idempotent: reference entries are matched by name, products by name, and
    registrations are only loaded into an empty history.
    """
    snapshot = demo_snapshot()
    reference = snapshot.reference
    counts = {
        "users": _ensure_names(User, reference.users),
        "locations": _ensure_names(Location, reference.locations),
        "purposes": _ensure_names(Purpose, reference.purposes),
        "categories": _ensure_names(Category, (c.name for c in reference.categories)),
    }
    db.session.flush()

    category_ids = {c.name: c.id for c in db.session.query(Category).all()}
    existing_products = {name for (name,) in db.session.query(Product.name).all()}
    created_products = 0
    for product in reference.products:
        if product.name in existing_products:
            continue
        category_name = reference.category_name(product.category_id)
        db.session.add(
            Product(
                name=product.name,
                qr_code=product.qr_code,
                category_id=category_ids.get(category_name),
            )
        )
        created_products += 1
    counts["products"] = created_products

    created_registrations = 0
    if db.session.query(Registration).count() == 0:
        for reg in snapshot.registrations:
            db.session.add(
                Registration(
                    user_name=reg.user,
                    product_name=reg.product,
                    location=reg.location,
                    purpose=reg.purpose,
                    occurred_at=parse_iso_datetime(reg.timestamp),
                    date=reg.date,
                    time=reg.time,
                    qr_code=reg.qr_code,
                )
            )
            created_registrations += 1
    counts["registrations"] = created_registrations

    db.session.commit()
    return counts
