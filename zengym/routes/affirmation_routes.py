# backend/zengym/routes/affirmation_routes.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from .. import db, get_aggregator
from ..affirmations import affirmation_for_date
from ..models.affirmation import AffirmationHistory
from ..schemas import AffirmationCreate, parse
from .auth_routes import current_user_id

affirmations_bp = Blueprint("affirmations", __name__)


@affirmations_bp.route("/today", methods=["GET"])
@jwt_required()
def today_affirmation():
    today = get_aggregator().today()
    return jsonify({"date": today.isoformat(), "affirmation": affirmation_for_date(today)}), 200


@affirmations_bp.route("/history", methods=["GET"])
@jwt_required()
def affirmation_history():
    rows = (
        AffirmationHistory.query.filter_by(user_id=current_user_id())
        .order_by(AffirmationHistory.date.asc())
        .all()
    )
    return jsonify({"history": [r.to_dict() for r in rows]}), 200


@affirmations_bp.route("/history", methods=["POST"])
@jwt_required()
def record_affirmation():
    payload = parse(AffirmationCreate, request.get_json(silent=True), "Invalid affirmation")

    entry = AffirmationHistory(
        user_id=current_user_id(),
        affirmation=payload.affirmation,
        date=get_aggregator().clock(),
    )
    db.session.add(entry)
    db.session.commit()
    return jsonify(entry.to_dict()), 201
