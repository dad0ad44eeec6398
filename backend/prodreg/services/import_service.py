# Overview: Service-layer operations for bulk product imports.

"""
Product import.

Accepts the two-column sheet the admin screen exports: product name, then
category name. The first row is a header. Rows may be tab- or
comma-separated; the separator is detected per row.
"""
from __future__ import annotations

import csv
import io
import zipfile
from dataclasses import dataclass
from typing import Iterable, Optional

from flask import current_app

from ..extensions import db
from ..models import Category, Product


class ImportError(ValueError):
    """Raised when import operations fail."""


TEXT_EXTENSIONS = {"csv", "txt", "tsv"}
EXCEL_EXTENSIONS = {"xlsx", "xlsm", "xltx", "xltm"}
MAX_NAME_LENGTH = 255


@dataclass(frozen=True)
class ProductRow:
    name: str
    category_name: str = ""


def _clean(cell) -> str:
    if cell is None:
        return ""
    return str(cell).replace('"', "").strip()


def _split_line(line: str) -> list[str]:
    cells = next(csv.reader([line], delimiter="\t"), [])
    if len(cells) <= 1:
        cells = next(csv.reader([line], delimiter=","), [])
    return cells


def parse_text_rows(text: str) -> list[ProductRow]:
    rows = []
    for line in text.splitlines()[1:]:
        line = line.strip()
        if not line:
            continue
        cells = _split_line(line)
        name = _clean(cells[0]) if cells else ""
        if not name:
            continue
        category = _clean(cells[1]) if len(cells) > 1 else ""
        rows.append(ProductRow(name=name, category_name=category))
    return rows


def parse_excel_rows(stream) -> list[ProductRow]:
    from openpyxl import load_workbook
    from openpyxl.utils.exceptions import InvalidFileException

    try:
        wb = load_workbook(stream, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        raise ImportError(f"File is not a valid Excel workbook: {exc}")
    sheet = wb.active
    rows = []
    for index, values in enumerate(sheet.iter_rows(values_only=True)):
        if index == 0 or not values:
            continue
        name = _clean(values[0])
        if not name:
            continue
        category = _clean(values[1]) if len(values) > 1 else ""
        rows.append(ProductRow(name=name, category_name=category))
    wb.close()
    return rows


def read_upload(filename: str, stream) -> list[ProductRow]:
    """
    Raises:
        ImportError: unsupported extension, oversize or undecodable file
    """
    ext = (filename or "").rsplit(".", 1)[-1].lower()
    max_bytes = current_app.config.get("MAX_IMPORT_BYTES", 2 * 1024 * 1024)

    raw = stream.read(max_bytes + 1)
    if len(raw) > max_bytes:
        raise ImportError(f"File exceeds {max_bytes} bytes")

    if ext in TEXT_EXTENSIONS:
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError:
            raise ImportError("File must be UTF-8 encoded")
        return parse_text_rows(text)
    if ext in EXCEL_EXTENSIONS:
        return parse_excel_rows(io.BytesIO(raw))
    raise ImportError(f"Unsupported file type: .{ext}")


def _category_lookup() -> dict[str, int]:
    return {c.name.lower(): c.id for c in db.session.query(Category).all()}


def import_products(rows: Iterable[ProductRow]) -> dict:
    """
    Create a product per row. Names already present (case-insensitive), in
    the database or earlier in the same file, are skipped. Unknown category
    names leave the product uncategorised.
    """
    existing = {name.lower() for (name,) in db.session.query(Product.name).all()}
    categories = _category_lookup()

    imported = 0
    skipped = 0
    for row in rows:
        key = row.name.lower()
        if key in existing or len(row.name) > MAX_NAME_LENGTH:
            skipped += 1
            continue

        category_id: Optional[int] = None
        if row.category_name:
            category_id = categories.get(row.category_name.lower())

        db.session.add(Product(name=row.name, category_id=category_id))
        existing.add(key)
        imported += 1

    db.session.commit()
    current_app.logger.info("Product import finished: %d imported, %d skipped", imported, skipped)
    return {"imported": imported, "skipped": skipped}
