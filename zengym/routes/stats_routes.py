# backend/zengym/routes/stats_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from .. import get_aggregator
from .auth_routes import current_user_id

stats_bp = Blueprint("stats", __name__)


# -------------------------
# GET /api/user/stats
# -------------------------
@stats_bp.route("/stats", methods=["GET"])
@jwt_required()
def user_stats():
    """
    Returns:
    {
      "total_workouts": 12,   # last 30 days
      "weekly_workouts": 4,   # last 7 days
      "streak": 3
    }
    """
    return jsonify(get_aggregator().get_stats(current_user_id())), 200


# -------------------------
# GET /api/user/weekly-data
# -------------------------
@stats_bp.route("/weekly-data", methods=["GET"])
@jwt_required()
def weekly_data():
    """
    Seven buckets, oldest first:
    [{"day": "Mon", "date": "2025-11-17", "workouts": 1, "duration": 45}, ...]
    """
    return jsonify(get_aggregator().get_weekly_histogram(current_user_id())), 200
