# Overview: Flask API routes for products operations; parses input and returns JSON responses.

# backend/prodreg/routes/products.py
"""
Product management routes.

Products are listed through the same snapshot the history view uses, so the
demonstration dataset shows up here too when the database is down.
"""
from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from ..models import Product
from ..services import products_service
from ..services.reference_service import ReferenceNotFound
from ..validation import (
    ModelValidationPolicy,
    ValidationError,
    enforce_rules_product,
    normalize_category_ref,
    validate_payload,
)

PRODUCT_POLICY = ModelValidationPolicy(
    writable_fields={"name", "qr_code", "category_id", "attachment_url", "attachment_name"},
    required_on_create={"name"},
)

products_bp = Blueprint("products", __name__, url_prefix="/api/products")


def _validated_patch(partial: bool) -> dict:
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if isinstance(payload, dict):
        payload = normalize_category_ref(payload)
    patch = validate_payload(model=Product, payload=payload, policy=PRODUCT_POLICY, partial=partial)
    enforce_rules_product(patch)
    return patch


@products_bp.get("")
def list_products():
    """
    List products.

    Query params:
    - search: str (optional) - admin search on name, QR code or category name
    - category_id: str (optional) - picker category restriction ("all" for every category)
    - q: str (optional) - picker search on name or QR code
    """
    try:
        result = products_service.list_products(
            search=request.args.get("search"),
            category_id=request.args.get("category_id"),
            q=request.args.get("q"),
        )
    except SQLAlchemyError:
        current_app.logger.exception("Failed to list products")
        return jsonify({"error": "Database unavailable"}), 500
    return jsonify(result), 200


@products_bp.get("/lookup")
def lookup_product():
    """Resolve a scanned QR code to a product (first match)."""
    qr_code = (request.args.get("qr_code") or "").strip()
    if not qr_code:
        return jsonify({"error": "qr_code is required"}), 400
    try:
        return jsonify(products_service.lookup_by_qr(qr_code)), 200
    except ReferenceNotFound as e:
        return jsonify({"error": str(e)}), 404
    except SQLAlchemyError:
        current_app.logger.exception("Failed to look up QR code")
        return jsonify({"error": "Database unavailable"}), 500


@products_bp.post("")
def create_product_route():
    try:
        patch = _validated_patch(partial=False)
        created = products_service.create_product(patch=patch)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        current_app.logger.exception("Failed to create product")
        return jsonify({"error": "Internal server error"}), 500
    return jsonify(created), 201


@products_bp.put("/<int:product_id>")
def update_product_route(product_id: int):
    try:
        patch = _validated_patch(partial=True)
        updated = products_service.update_product(product_id=product_id, patch=patch)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400
    except ReferenceNotFound as e:
        return jsonify({"error": str(e)}), 404
    except Exception:
        current_app.logger.exception("Failed to update product")
        return jsonify({"error": "Internal server error"}), 500
    return jsonify(updated), 200


@products_bp.delete("/<int:product_id>")
def delete_product_route(product_id: int):
    try:
        products_service.delete_product(product_id=product_id)
    except ReferenceNotFound as e:
        return jsonify({"error": str(e)}), 404
    except Exception:
        current_app.logger.exception("Failed to delete product")
        return jsonify({"error": "Internal server error"}), 500
    return jsonify({"ok": True}), 200


@products_bp.post("/<int:product_id>/qr-code")
def generate_qr_code_route(product_id: int):
    """Assign a freshly generated label code to the product."""
    try:
        updated = products_service.generate_qr_code(product_id=product_id)
    except ReferenceNotFound as e:
        return jsonify({"error": str(e)}), 404
    except Exception:
        current_app.logger.exception("Failed to generate QR code")
        return jsonify({"error": "Internal server error"}), 500
    return jsonify(updated), 200
