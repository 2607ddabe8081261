# backend/zengym/routes/session_routes.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from .. import get_aggregator
from ..schemas import SessionCreate, parse
from .auth_routes import current_user_id
from .routine_routes import get_owned_routine

sessions_bp = Blueprint("sessions", __name__)


def _safe_int(v, default: int) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


# ------------------------------
# POST /api/sessions
# ------------------------------
@sessions_bp.route("", methods=["POST"])
@jwt_required()
def log_session():
    """
    Expected body (both optional):
    {
      "routine_id": 3,
      "duration_minutes": 45
    }
    completed_at is always stamped server side.
    """
    user_id = current_user_id()
    payload = parse(SessionCreate, request.get_json(silent=True), "Invalid session data")

    if payload.routine_id is not None:
        get_owned_routine(user_id, payload.routine_id)

    session = get_aggregator().log_session(
        user_id,
        routine_id=payload.routine_id,
        duration_minutes=payload.duration_minutes,
    )
    return jsonify(session.to_dict()), 201


# ------------------------------
# GET /api/sessions?days=30
# ------------------------------
@sessions_bp.route("", methods=["GET"])
@jwt_required()
def recent_sessions():
    days = _safe_int(request.args.get("days"), 30)
    days = max(1, min(days, 365))

    rows = get_aggregator().recent_sessions(current_user_id(), days)
    return jsonify({"sessions": [s.to_dict() for s in reversed(rows)]}), 200
