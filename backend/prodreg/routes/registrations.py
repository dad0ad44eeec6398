# Overview: Flask API routes for registrations; parses input and returns JSON responses.

"""
Registration routes.

GET is the history view: filter then sort. Request values are checked here,
at the boundary, and turned into the engine's closed types before the
service runs.
"""
from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from ..engine import FilterCriteria, SortKey, SortOrder
from ..services import registration_service
from ..time_utils import is_calendar_date
from ..validation import ValidationError


registrations_bp = Blueprint("registrations", __name__, url_prefix="/api/registrations")


def _choice(enum_cls, name: str, default):
    raw = request.args.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return enum_cls.parse(raw)
    except ValueError:
        raise ValidationError(f"{name} must be one of: {', '.join(enum_cls.values())}")


def _date_arg(name: str):
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return None
    if not is_calendar_date(raw):
        raise ValidationError(f"{name} must be a YYYY-MM-DD date")
    return raw


def criteria_from_args() -> FilterCriteria:
    return FilterCriteria.build(
        search_text=request.args.get("search"),
        user=request.args.get("user"),
        location=request.args.get("location"),
        date_from=_date_arg("date_from"),
        date_to=_date_arg("date_to"),
    )


@registrations_bp.get("")
def list_registrations():
    """
    Registration history.

    Query params:
    - search: str (optional) - matches user, product, location, purpose or QR code
    - user: str (optional) - exact user name, "all" for everyone
    - location: str (optional) - exact location name, "all" for every location
    - date_from / date_to: YYYY-MM-DD (optional, inclusive)
    - sort_by: date | user | product | location (default date)
    - order: newest | oldest (default newest)
    """
    try:
        criteria = criteria_from_args()
        sort_by = _choice(SortKey, "sort_by", SortKey.DATE)
        order = _choice(SortOrder, "order", SortOrder.NEWEST)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    try:
        result = registration_service.list_history(criteria, sort_by, order)
    except SQLAlchemyError:
        current_app.logger.exception("Failed to load registration history")
        return jsonify({"error": "Database unavailable"}), 500
    return jsonify(result), 200


@registrations_bp.post("")
def create_registration():
    payload = request.get_json(silent=True) or {}
    try:
        created = registration_service.record_registration(payload)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        current_app.logger.exception("Failed to save registration")
        return jsonify({"error": "Internal server error"}), 500
    return jsonify(created), 201
