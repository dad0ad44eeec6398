# Overview: Flask API routes for imports; parses input and returns JSON responses.

"""
Import Routes

Supports CSV/TSV text and Excel (.xlsx) uploads of the product sheet.
"""

from flask import Blueprint, current_app, jsonify, request

from ..services import import_service
from ..services.import_service import ImportError


imports_bp = Blueprint("imports", __name__, url_prefix="/api/imports")


@imports_bp.post("/products")
def import_products_route():
    if "file" not in request.files:
        return jsonify({"error": "file is required"}), 400

    file = request.files["file"]
    try:
        rows = import_service.read_upload(file.filename or "", file.stream)
        result = import_service.import_products(rows)
    except ImportError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        current_app.logger.exception("Failed to import products")
        return jsonify({"error": "Internal server error"}), 500
    return jsonify(result), 200
