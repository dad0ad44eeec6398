# Overview: Loads the reference lists and registration history as engine snapshots.

"""
Snapshot loading.

The database is the source of truth. Every read builds a fresh snapshot;
nothing is cached between requests, so a write followed by a read always
sees the write (services commit before returning).

When the database cannot be queried and DEMO_FALLBACK_ENABLED is set, the
built-in demonstration dataset is served instead of an error page.
"""
from __future__ import annotations

from flask import current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models import Category, Location, Product, Purpose, Registration, User
from ..engine import ReferenceStore, RegistrationStore, Snapshot, SOURCE_DATABASE
from ..engine.demo_data import demo_snapshot


def _names(model) -> tuple[str, ...]:
    rows = db.session.query(model.name).order_by(model.id.asc()).all()
    return tuple(row.name for row in rows)


def load_reference_store() -> ReferenceStore:
    products = db.session.query(Product).order_by(Product.id.asc()).all()
    categories = db.session.query(Category).order_by(Category.id.asc()).all()
    return (
        ReferenceStore()
        .replace_names("users", _names(User))
        .replace_names("locations", _names(Location))
        .replace_names("purposes", _names(Purpose))
        .replace_categories(c.to_snapshot() for c in categories)
        .replace_products(p.to_snapshot() for p in products)
    )


def load_registration_store() -> RegistrationStore:
    rows = (
        db.session.query(Registration)
        .order_by(Registration.occurred_at.desc(), Registration.id.desc())
        .all()
    )
    return RegistrationStore().replace_all(r.to_snapshot() for r in rows)


def load_snapshot() -> Snapshot:
    """
    Read every list from the database.

    Raises:
        SQLAlchemyError: when the database fails and the demo fallback is disabled
    """
    try:
        return Snapshot(
            reference=load_reference_store(),
            registrations=load_registration_store(),
            source=SOURCE_DATABASE,
        )
    except SQLAlchemyError:
        db.session.rollback()
        if not current_app.config.get("DEMO_FALLBACK_ENABLED", True):
            raise
        current_app.logger.warning(
            "Database unavailable, serving demonstration data", exc_info=True
        )
        return demo_snapshot()


def database_available() -> bool:
    try:
        db.session.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Database health check failed")
        return False
