from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from ..services import reporting_service


reports_bp = Blueprint("reports", __name__, url_prefix="/api/reports")


@reports_bp.get("/statistics")
def statistics_report():
    limit = request.args.get("limit", type=int)
    try:
        report = reporting_service.statistics(limit=limit)
        return jsonify(report), 200
    except reporting_service.ReportError as exc:
        return jsonify({"error": str(exc)}), 400
    except SQLAlchemyError:
        current_app.logger.exception("Failed to build statistics report")
        return jsonify({"error": "Database unavailable"}), 500


@reports_bp.get("/top/<dimension>")
def top_report(dimension: str):
    limit = request.args.get("limit", 5, type=int)
    try:
        report = reporting_service.top_report(dimension=dimension, limit=limit)
        return jsonify(report), 200
    except reporting_service.ReportError as exc:
        return jsonify({"error": str(exc)}), 400
    except SQLAlchemyError:
        current_app.logger.exception("Failed to build %s ranking", dimension)
        return jsonify({"error": "Database unavailable"}), 500
