# backend/zengym/__init__.py
import logging

from flask import Flask, current_app, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager
from werkzeug.exceptions import HTTPException

from config import Config

db = SQLAlchemy()
jwt = JWTManager()


def create_app(config_class=Config, store=None, answer_provider=None, clock=None):
    """
    `store`, `answer_provider` and `clock` default to the SQLAlchemy store,
    an OpenAI-backed provider and UTC wall time; tests pass their own.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)

    # CORS: allow the web client to call /api/*
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    # -----------------------------
    # JWT error handlers
    # -----------------------------
    @jwt.unauthorized_loader
    def unauthorized_callback(reason):
        return (
            jsonify(
                {
                    "message": "Missing or invalid auth token",
                    "error": reason,
                }
            ),
            401,
        )

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        return (
            jsonify(
                {
                    "message": "Invalid auth token",
                    "error": reason,
                }
            ),
            422,
        )

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"message": "Token has expired"}), 401

    # -----------------------------
    # App error handlers
    # -----------------------------
    from .errors import ZenGymError

    @app.errorhandler(ZenGymError)
    def handle_zengym_error(e):
        db.session.rollback()
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        current_app.logger.exception(f"Unhandled error: {e}")
        return jsonify({"message": "Internal server error"}), 500

    # -----------------------------
    # Aggregator + assistant
    # -----------------------------
    from .activity import ActivityAggregator
    from .assistant import AnswerProvider
    from .storage import SqlAlchemyStore

    app.extensions["zengym.aggregator"] = ActivityAggregator(
        store or SqlAlchemyStore(db),
        clock=clock,
        daily_limit=app.config["AI_DAILY_QUESTION_LIMIT"],
        pro_plan_months=app.config["PRO_PLAN_MONTHS"],
    )
    app.extensions["zengym.answer_provider"] = (
        answer_provider or AnswerProvider.from_config(app.config)
    )

    # -----------------------------
    # IMPORT BLUEPRINTS (all routes)
    # -----------------------------
    from .routes.auth_routes import auth_bp
    from .routes.stats_routes import stats_bp
    from .routes.routine_routes import routines_bp
    from .routes.session_routes import sessions_bp
    from .routes.settings_routes import settings_bp
    from .routes.ai_routes import ai_bp
    from .routes.affirmation_routes import affirmations_bp

    # -----------------------------
    # REGISTER BLUEPRINTS
    # -----------------------------
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(stats_bp, url_prefix="/api/user")
    app.register_blueprint(routines_bp, url_prefix="/api/routines")
    app.register_blueprint(sessions_bp, url_prefix="/api/sessions")
    app.register_blueprint(settings_bp, url_prefix="/api")
    app.register_blueprint(ai_bp, url_prefix="/api/ai")
    app.register_blueprint(affirmations_bp, url_prefix="/api/affirmations")

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    # -----------------------------
    # DB init
    # -----------------------------
    with app.app_context():
        from .models import affirmation, settings, user, workout  # noqa: F401
        db.create_all()

    return app


def get_aggregator():
    return current_app.extensions["zengym.aggregator"]


def get_answer_provider():
    return current_app.extensions["zengym.answer_provider"]
