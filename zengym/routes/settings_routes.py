# backend/zengym/routes/settings_routes.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from .. import get_aggregator
from ..schemas import SettingsUpdate, parse
from .auth_routes import current_user_id

settings_bp = Blueprint("settings", __name__)


@settings_bp.route("/settings", methods=["GET"])
@jwt_required()
def get_settings():
    settings = get_aggregator().get_or_create_settings(current_user_id())
    return jsonify(settings.to_dict()), 200


@settings_bp.route("/settings", methods=["PUT"])
@jwt_required()
def update_settings():
    payload = parse(SettingsUpdate, request.get_json(silent=True), "Invalid settings data")
    settings = get_aggregator().update_settings(
        current_user_id(), payload.model_dump(exclude_none=True)
    )
    return jsonify(settings.to_dict()), 200


# ------------------------------
# POST /api/upgrade-pro
# No payment here: flips the flag and sets the expiry.
# ------------------------------
@settings_bp.route("/upgrade-pro", methods=["POST"])
@jwt_required()
def upgrade_pro():
    settings = get_aggregator().upgrade_to_pro(current_user_id())
    return jsonify({"success": True, "settings": settings.to_dict()}), 200
