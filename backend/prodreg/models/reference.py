from __future__ import annotations

from ..extensions import db
from ..engine import types as snapshots
from ..time_utils import to_utc_z


class _NamedEntry:
    """
    Shared shape of the plain name lists (users, locations, purposes).

    Names are the identity used by registrations; rows carry a surrogate id
    only so the API can address them.
    """
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, unique=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id} name={self.name!r}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "created_at": to_utc_z(self.created_at),
        }


class User(_NamedEntry, db.Model):
    """A person who can be selected on the registration form."""
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}


class Location(_NamedEntry, db.Model):
    __tablename__ = "locations"
    __table_args__ = {"sqlite_autoincrement": True}


class Purpose(_NamedEntry, db.Model):
    __tablename__ = "purposes"
    __table_args__ = {"sqlite_autoincrement": True}


class Category(db.Model):
    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Category id={self.id} name={self.name!r}>"

    def to_dict(self) -> dict:
        return {"id": str(self.id), "name": self.name}

    def to_snapshot(self) -> snapshots.Category:
        return snapshots.Category(id=str(self.id), name=self.name)


class Product(db.Model):
    """
    Product master data.

    category_id is a weak reference: there is no foreign key, and a category
    that has been deleted resolves to the unknown-category label on display.

    qr_code is the scan-to-product lookup value. It is not unique; lookups
    take the first match.
    """
    __tablename__ = "products"
    __table_args__ = (
        db.Index("ix_products_name", "name"),
        db.Index("ix_products_qr_code", "qr_code"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    qr_code = db.Column(db.String(64), nullable=True)
    category_id = db.Column(db.Integer, nullable=True)

    attachment_url = db.Column(db.String(1024), nullable=True)
    attachment_name = db.Column(db.String(255), nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r} qr_code={self.qr_code!r}>"

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "qr_code": self.qr_code,
            "category_id": str(self.category_id) if self.category_id is not None else None,
            "attachment_url": self.attachment_url,
            "attachment_name": self.attachment_name,
            "created_at": to_utc_z(self.created_at),
        }

    def to_snapshot(self) -> snapshots.Product:
        data = self.to_dict()
        return snapshots.Product(
            id=data["id"],
            name=data["name"],
            qr_code=data["qr_code"],
            category_id=data["category_id"],
            created_at=data["created_at"],
            attachment_url=data["attachment_url"],
            attachment_name=data["attachment_name"],
        )
