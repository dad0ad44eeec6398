"""
Product import tests: sheet parsing and the upload endpoint.
"""

import io

from openpyxl import Workbook

from prodreg.extensions import db
from prodreg.models import Category, Product
from prodreg.services.import_service import ProductRow, import_products, parse_text_rows


class TestParseTextRows:

    def test_header_is_skipped_and_separators_detected_per_row(self):
        text = "Product\tCategorie\nSpray A\tSmeermiddelen\n\"Spray B\",Reinigers\n\nSpray C\n"
        assert parse_text_rows(text) == [
            ProductRow("Spray A", "Smeermiddelen"),
            ProductRow("Spray B", "Reinigers"),
            ProductRow("Spray C", ""),
        ]

    def test_rows_without_name_are_dropped(self):
        assert parse_text_rows("name,category\n,Reinigers\n  \n") == []


class TestImportProducts:

    def test_existing_names_are_skipped(self, db_session):
        db.session.add(Category(name="Reinigers"))
        db.session.add(Product(name="Foam Cleaner"))
        db.session.commit()

        result = import_products([
            ProductRow("foam cleaner", "Reinigers"),
            ProductRow("Metal Clean", "reinigers"),
            ProductRow("METAL CLEAN", ""),
            ProductRow("Mystery", "No such category"),
        ])
        assert result == {"imported": 2, "skipped": 2}

        metal = db.session.query(Product).filter_by(name="Metal Clean").one()
        reinigers = db.session.query(Category).filter_by(name="Reinigers").one()
        assert metal.category_id == reinigers.id
        assert db.session.query(Product).filter_by(name="Mystery").one().category_id is None

    def test_overlong_name_is_skipped(self, db_session):
        result = import_products([ProductRow("x" * 300)])
        assert result == {"imported": 0, "skipped": 1}


class TestImportEndpoint:

    def test_csv_upload(self, client, db_session):
        data = {"file": (io.BytesIO("naam;categorie\nSpray A,\nSpray B,\n".encode("utf-8")), "products.csv")}
        resp = client.post("/api/imports/products", data=data, content_type="multipart/form-data")
        assert resp.status_code == 200
        assert resp.get_json() == {"imported": 2, "skipped": 0}

    def test_xlsx_upload(self, client, db_session):
        wb = Workbook()
        ws = wb.active
        ws.append(["Product", "Categorie"])
        ws.append(["Grease LT2", None])
        ws.append(["Fin Super", None])
        buf = io.BytesIO()
        wb.save(buf)
        buf.seek(0)

        data = {"file": (buf, "products.xlsx")}
        resp = client.post("/api/imports/products", data=data, content_type="multipart/form-data")
        assert resp.status_code == 200
        assert resp.get_json()["imported"] == 2

    def test_missing_file(self, client, db_session):
        resp = client.post("/api/imports/products", data={}, content_type="multipart/form-data")
        assert resp.status_code == 400

    def test_corrupt_xlsx_rejected(self, client, db_session):
        data = {"file": (io.BytesIO(b"this is not a workbook"), "products.xlsx")}
        resp = client.post("/api/imports/products", data=data, content_type="multipart/form-data")
        assert resp.status_code == 400
        assert resp.get_json()["error"].startswith("File is not a valid Excel workbook")

    def test_unsupported_extension(self, client, db_session):
        data = {"file": (io.BytesIO(b"%PDF"), "products.pdf")}
        resp = client.post("/api/imports/products", data=data, content_type="multipart/form-data")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Unsupported file type: .pdf"
