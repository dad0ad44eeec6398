# Overview: Flask API routes for the reference lists; parses input and returns JSON responses.

"""
Reference list routes.

One set of handlers serves /api/users, /api/locations, /api/purposes and
/api/categories. Entries are addressed by id; the name is what
registrations record.
"""
from flask import Blueprint, current_app, jsonify, request

from ..services import reference_service
from ..services.reference_service import ReferenceNotFound
from ..validation import ConflictError, ValidationError


reference_bp = Blueprint("reference", __name__, url_prefix="/api")

KIND = "<any(users, locations, purposes, categories):kind>"


def _requested_name():
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValidationError("Invalid JSON payload")
    return payload.get("name")


@reference_bp.get(f"/{KIND}")
def list_entries_route(kind: str):
    """
    Query params:
    - search: str (optional) - case-insensitive substring filter on name
    """
    search = request.args.get("search")
    return jsonify(reference_service.list_entries(kind, search=search)), 200


@reference_bp.post(f"/{KIND}")
def create_entry_route(kind: str):
    try:
        created = reference_service.create_entry(kind, _requested_name())
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400
    except ConflictError as e:
        return jsonify({"error": str(e)}), 409
    except Exception:
        current_app.logger.exception("Failed to create %s entry", kind)
        return jsonify({"error": "Internal server error"}), 500
    return jsonify(created), 201


@reference_bp.put(f"/{KIND}/<int:entry_id>")
def rename_entry_route(kind: str, entry_id: int):
    try:
        updated = reference_service.rename_entry(kind, entry_id, _requested_name())
    except ReferenceNotFound as e:
        return jsonify({"error": str(e)}), 404
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400
    except ConflictError as e:
        return jsonify({"error": str(e)}), 409
    except Exception:
        current_app.logger.exception("Failed to rename %s entry", kind)
        return jsonify({"error": "Internal server error"}), 500
    return jsonify(updated), 200


@reference_bp.delete(f"/{KIND}/<int:entry_id>")
def delete_entry_route(kind: str, entry_id: int):
    try:
        reference_service.delete_entry(kind, entry_id)
    except ReferenceNotFound as e:
        return jsonify({"error": str(e)}), 404
    except Exception:
        current_app.logger.exception("Failed to delete %s entry", kind)
        return jsonify({"error": "Internal server error"}), 500
    return jsonify({"ok": True}), 200
