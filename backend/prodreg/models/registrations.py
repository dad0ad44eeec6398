from __future__ import annotations

from ..extensions import db
from ..engine import types as snapshots
from ..time_utils import to_utc_z


class Registration(db.Model):
    """
    One recorded use of a product: who, what, where, why and when.

    DESIGN:
    - Rows are append-only; there is no update path.
    - user/product/location/purpose are stored as text, not foreign keys,
      so renaming or deleting a reference entry leaves history untouched.
    - date and time are derived from occurred_at (UTC) when the row is
      created and must stay consistent with it.
    """
    __tablename__ = "registrations"
    __table_args__ = (
        db.Index("ix_registrations_user", "user_name"),
        db.Index("ix_registrations_location", "location"),
        db.Index("ix_registrations_occurred_at", "occurred_at"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)

    user_name = db.Column(db.String(255), nullable=False)
    product_name = db.Column(db.String(255), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    purpose = db.Column(db.String(255), nullable=False)

    occurred_at = db.Column(db.DateTime(timezone=True), nullable=False)
    date = db.Column(db.String(10), nullable=False)
    time = db.Column(db.String(8), nullable=False)

    qr_code = db.Column(db.String(64), nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def __repr__(self) -> str:
        return f"<Registration id={self.id} user={self.user_name!r} product={self.product_name!r}>"

    def to_snapshot(self) -> snapshots.Registration:
        return snapshots.Registration(
            id=str(self.id),
            user=self.user_name,
            product=self.product_name,
            location=self.location,
            purpose=self.purpose,
            timestamp=to_utc_z(self.occurred_at, timespec="milliseconds"),
            date=self.date,
            time=self.time,
            qr_code=self.qr_code,
        )

    def to_dict(self) -> dict:
        return self.to_snapshot().to_dict()
