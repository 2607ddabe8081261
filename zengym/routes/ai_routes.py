# backend/zengym/routes/ai_routes.py
from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import jwt_required

from .. import get_aggregator, get_answer_provider
from ..errors import QuotaExceededError
from ..schemas import AskQuestion, parse
from .auth_routes import current_user_id

ai_bp = Blueprint("ai", __name__)


@ai_bp.route("/check", methods=["GET"])
@jwt_required()
def check_quota():
    """{"can_ask": true, "questions_left": 2}; questions_left is -1 for Pro."""
    status = get_aggregator().can_ask_ai(current_user_id())
    return jsonify(status.to_dict()), 200


@ai_bp.route("/ask", methods=["POST"])
@jwt_required()
def ask():
    user_id = current_user_id()
    payload = parse(AskQuestion, request.get_json(silent=True), "Question is required")

    aggregator = get_aggregator()
    if not aggregator.can_ask_ai(user_id).can_ask:
        current_app.logger.info(f"[ai/ask] quota exhausted for user_id={user_id}")
        raise QuotaExceededError()

    answer = get_answer_provider().ask(payload.question)
    aggregator.increment_ai_questions(user_id)

    return jsonify({"answer": answer}), 200
