# backend/prodreg/routes/system.py
"""
System health endpoint.

Reports database reachability and which data source reads are served from.
"""

import time
from flask import Blueprint, current_app, jsonify

from ..services import snapshot_service

system_bp = Blueprint("system", __name__)


@system_bp.get("/api/health")
def health():
    start_time = time.time()
    db_ok = snapshot_service.database_available()
    elapsed_ms = (time.time() - start_time) * 1000

    fallback = current_app.config.get("DEMO_FALLBACK_ENABLED", True)
    if db_ok:
        source = "database"
    elif fallback:
        source = "demo"
    else:
        source = None

    return jsonify({
        "status": "healthy" if db_ok else "degraded",
        "database": {
            "status": "healthy" if db_ok else "unhealthy",
            "latency_ms": round(elapsed_ms, 2),
        },
        "data_source": source,
    }), 200 if db_ok else 503
