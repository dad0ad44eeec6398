"""
Built-in demonstration dataset.

Served when the database cannot be reached, and loaded into an empty
database by `flask demo seed`.
"""
from __future__ import annotations

from .stores import ReferenceStore, RegistrationStore, Snapshot, SOURCE_DEMO
from .types import Category, Product, Registration


DEMO_USERS = (
    "Tom Peckstadt",
    "Sven De Poorter",
    "Nele Herteleer",
    "Wim Peckstadt",
    "Siegfried Weverbergh",
    "Jan Janssen",
)

DEMO_CATEGORIES = (
    Category(id="1", name="Smeermiddelen"),
    Category(id="2", name="Reinigers"),
    Category(id="3", name="Onderhoud"),
)

DEMO_PRODUCTS = (
    Product(id="1", name="Interflon Metal Clean spray 500ml", qr_code="IFLS001", category_id="1"),
    Product(id="2", name="Interflon Grease LT2 Lube shuttle 400gr", qr_code="IFFL002", category_id="1"),
    Product(id="3", name="Interflon Maintenance Kit", qr_code="IFD003", category_id="2"),
    Product(id="4", name="Interflon Food Lube spray 500ml", qr_code="IFGR004", category_id="1"),
    Product(id="5", name="Interflon Foam Cleaner spray 500ml", qr_code="IFMC005", category_id="2"),
    Product(id="6", name="Interflon Fin Super", qr_code="IFMK006", category_id="3"),
)

DEMO_LOCATIONS = (
    "Warehouse Dematic groot boven",
    "Warehouse Interflon",
    "Warehouse Dematic klein beneden",
    "Onderhoud werkplaats",
    "Kantoor 1.1",
)

DEMO_PURPOSES = ("Presentatie", "Thuiswerken", "Reparatie", "Training", "Demonstratie")

_METAL_CLEAN = ("Interflon Metal Clean spray 500ml", "IFLS001")
_GREASE = ("Interflon Grease LT2 Lube shuttle 400gr", "IFFL002")
_KIT = ("Interflon Maintenance Kit", "IFD003")
_FOOD_LUBE = ("Interflon Food Lube spray 500ml", "IFGR004")
_FOAM = ("Interflon Foam Cleaner spray 500ml", "IFMC005")

# (id, user, product, location, purpose, timestamp)
_DEMO_ROWS = (
    ("1", "Tom Peckstadt", _METAL_CLEAN, "Warehouse Interflon", "Reparatie", "2025-06-15T05:41:00Z"),
    ("2", "Nele Herteleer", _METAL_CLEAN, "Warehouse Dematic klein beneden", "Training", "2025-06-15T05:48:00Z"),
    ("3", "Tom Peckstadt", _GREASE, "Warehouse Dematic groot boven", "Reparatie", "2025-06-15T12:53:00Z"),
    ("4", "Tom Peckstadt", _GREASE, "Warehouse Dematic groot boven", "Demonstratie", "2025-06-16T20:32:00Z"),
    ("5", "Sven De Poorter", _METAL_CLEAN, "Warehouse Dematic groot boven", "Presentatie", "2025-06-16T21:07:00Z"),
    ("6", "Tom Peckstadt", _KIT, "Onderhoud werkplaats", "Reparatie", "2025-06-14T10:15:00Z"),
    ("7", "Siegfried Weverbergh", _FOOD_LUBE, "Warehouse Interflon", "Training", "2025-06-14T14:22:00Z"),
    ("8", "Wim Peckstadt", _FOAM, "Warehouse Dematic klein beneden", "Demonstratie", "2025-06-13T09:30:00Z"),
    ("9", "Sven De Poorter", _KIT, "Onderhoud werkplaats", "Reparatie", "2025-06-13T16:45:00Z"),
    ("10", "Tom Peckstadt", _METAL_CLEAN, "Warehouse Dematic groot boven", "Presentatie", "2025-06-12T11:20:00Z"),
    ("11", "Siegfried Weverbergh", _GREASE, "Warehouse Interflon", "Training", "2025-06-12T15:10:00Z"),
    ("12", "Siegfried Weverbergh", _FOOD_LUBE, "Warehouse Dematic klein beneden", "Demonstratie", "2025-06-11T08:55:00Z"),
    ("13", "Tom Peckstadt", _GREASE, "Warehouse Dematic groot boven", "Reparatie", "2025-06-10T13:40:00Z"),
)

DEMO_REGISTRATIONS = tuple(
    Registration(
        id=reg_id,
        user=user,
        product=product,
        location=location,
        purpose=purpose,
        timestamp=timestamp,
        date=timestamp[:10],
        time=timestamp[11:19],
        qr_code=qr_code,
    )
    for reg_id, user, (product, qr_code), location, purpose, timestamp in _DEMO_ROWS
)


def demo_snapshot() -> Snapshot:
    reference = ReferenceStore(
        users=DEMO_USERS,
        products=DEMO_PRODUCTS,
        categories=DEMO_CATEGORIES,
        locations=DEMO_LOCATIONS,
        purposes=DEMO_PURPOSES,
    )
    return Snapshot(
        reference=reference,
        registrations=RegistrationStore(DEMO_REGISTRATIONS),
        source=SOURCE_DEMO,
    )
