# backend/zengym/routes/auth_routes.py

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import create_access_token, get_jwt_identity, jwt_required
from sqlalchemy import or_

from .. import db
from ..errors import NotFoundError
from ..models.user import User

auth_bp = Blueprint("auth", __name__)


def current_user_id() -> int:
    return int(get_jwt_identity())


# -----------------------------
# Routes
# -----------------------------
@auth_bp.route("/register", methods=["POST"])
def register():
    data = request.get_json(silent=True) or {}

    email = (data.get("email") or "").strip().lower()
    username = (data.get("username") or "").strip()
    password = data.get("password") or ""  # do NOT strip passwords

    if not email or not username or not password:
        return jsonify({"message": "email, username and password are required"}), 400

    if len(password) < 6:
        return jsonify({"message": "password must be at least 6 characters"}), 400

    if User.query.filter_by(email=email).first():
        return jsonify({"message": "email already in use"}), 400

    if User.query.filter_by(username=username).first():
        return jsonify({"message": "username already in use"}), 400

    user = User(
        email=email,
        username=username,
        first_name=(data.get("first_name") or "").strip() or None,
        last_name=(data.get("last_name") or "").strip() or None,
    )
    user.set_password(password)

    db.session.add(user)
    db.session.commit()
    current_app.logger.info(f"[auth/register] created user_id={user.id}")

    access_token = create_access_token(identity=str(user.id))
    return jsonify({"token": access_token, "user": user.to_dict()}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    """
    Accepts:
      - { "email": "...", "password": "..." }
      - { "username": "...", "password": "..." }
      - { "identifier": "...", "password": "..." }  # email or username
    """
    data = request.get_json(silent=True) or {}

    identifier = (data.get("identifier") or data.get("email") or data.get("username") or "").strip()
    password = data.get("password") or ""

    if not identifier or not password:
        return jsonify({"message": "identifier and password are required"}), 400

    user = User.query.filter(
        or_(
            User.email == identifier.lower(),
            User.username == identifier,
        )
    ).first()

    if not user or not user.check_password(password):
        current_app.logger.info(f"[auth/login] rejected identifier='{identifier}'")
        return jsonify({"message": "invalid credentials"}), 401

    access_token = create_access_token(identity=str(user.id))
    return jsonify({"token": access_token, "user": user.to_dict()}), 200


@auth_bp.route("/user", methods=["GET"])
@jwt_required()
def me():
    user = db.session.get(User, current_user_id())
    if not user:
        raise NotFoundError("user not found")
    return jsonify({"user": user.to_dict()}), 200
