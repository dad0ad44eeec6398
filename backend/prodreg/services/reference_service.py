# Overview: Service-layer operations for the reference lists (users, locations, purposes, categories).

from __future__ import annotations

from typing import Optional

from ..extensions import db
from ..models import Category, Location, Purpose, User
from ..validation import ConflictError, normalize_name
from ..engine import collation_key, filter_names


REFERENCE_MODELS = {
    "users": User,
    "locations": Location,
    "purposes": Purpose,
    "categories": Category,
}

LABELS = {
    "users": "User",
    "locations": "Location",
    "purposes": "Purpose",
    "categories": "Category",
}


class ReferenceNotFound(LookupError):
    """Raised when a reference entry does not exist."""


def _model_for(kind: str):
    model = REFERENCE_MODELS.get(kind)
    if model is None:
        raise ReferenceNotFound(f"Unknown reference list: {kind}")
    return model


def _get_entry(kind: str, entry_id: int):
    model = _model_for(kind)
    entry = db.session.query(model).filter(model.id == entry_id).first()
    if entry is None:
        raise ReferenceNotFound(f"{LABELS[kind]} not found")
    return entry


def _ensure_unique(kind: str, name: str, *, exclude_id: Optional[int] = None) -> None:
    model = _model_for(kind)
    query = db.session.query(model).filter(model.name == name)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    if query.first() is not None:
        raise ConflictError(f"{LABELS[kind]} already exists: {name}")


def list_entries(kind: str, search: Optional[str] = None) -> dict:
    """
    List a reference list collated by base letters (case and accents ignored).
    search narrows the list with a case-insensitive substring match on name.
    """
    model = _model_for(kind)
    entries = db.session.query(model).order_by(model.id.asc()).all()
    by_name = {entry.name: entry for entry in entries}
    names = filter_names(by_name.keys(), search)
    items = [by_name[name].to_dict() for name in sorted(names, key=collation_key)]
    return {"items": items, "count": len(items)}


def create_entry(kind: str, name) -> dict:
    """
    Raises:
        ValidationError: name missing or blank
        ConflictError: an entry with the same name already exists
    """
    model = _model_for(kind)
    clean = normalize_name(name)
    _ensure_unique(kind, clean)

    entry = model(name=clean)
    db.session.add(entry)
    db.session.commit()
    return entry.to_dict()


def rename_entry(kind: str, entry_id: int, name) -> dict:
    """
    Rename an entry. Registrations keep the name they were recorded with.

    Raises:
        ReferenceNotFound: entry does not exist
        ValidationError: name missing or blank
        ConflictError: another entry already has the new name
    """
    entry = _get_entry(kind, entry_id)
    clean = normalize_name(name)
    if clean == entry.name:
        return entry.to_dict()

    _ensure_unique(kind, clean, exclude_id=entry.id)
    entry.name = clean
    db.session.commit()
    return entry.to_dict()


def delete_entry(kind: str, entry_id: int) -> None:
    entry = _get_entry(kind, entry_id)
    db.session.delete(entry)
    db.session.commit()
