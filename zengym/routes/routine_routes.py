# backend/zengym/routes/routine_routes.py
from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import jwt_required

from .. import db
from ..errors import NotFoundError
from ..models.workout import WorkoutRoutine
from ..schemas import RoutineCreate, RoutineUpdate, parse
from .auth_routes import current_user_id

routines_bp = Blueprint("routines", __name__)


def get_owned_routine(user_id: int, routine_id: int) -> WorkoutRoutine:
    routine = WorkoutRoutine.query.filter_by(id=routine_id, user_id=user_id).first()
    if not routine:
        raise NotFoundError("Routine not found")
    return routine


@routines_bp.route("", methods=["GET"])
@jwt_required()
def list_routines():
    rows = (
        WorkoutRoutine.query.filter_by(user_id=current_user_id())
        .order_by(WorkoutRoutine.id.asc())
        .all()
    )
    return jsonify([r.to_dict() for r in rows]), 200


@routines_bp.route("", methods=["POST"])
@jwt_required()
def create_routine():
    payload = parse(RoutineCreate, request.get_json(silent=True), "Invalid routine data")

    routine = WorkoutRoutine(user_id=current_user_id(), **payload.model_dump())
    db.session.add(routine)
    db.session.commit()

    current_app.logger.info(f"[routines] user_id={routine.user_id} created routine_id={routine.id}")
    return jsonify(routine.to_dict()), 201


@routines_bp.route("/<int:routine_id>", methods=["GET"])
@jwt_required()
def get_routine(routine_id):
    return jsonify(get_owned_routine(current_user_id(), routine_id).to_dict()), 200


@routines_bp.route("/<int:routine_id>", methods=["PUT"])
@jwt_required()
def update_routine(routine_id):
    routine = get_owned_routine(current_user_id(), routine_id)
    payload = parse(RoutineUpdate, request.get_json(silent=True), "Invalid routine data")

    for key, value in payload.model_dump(exclude_unset=True).items():
        if key == "name" and value is None:
            continue
        if key == "exercises" and value is None:
            value = []
        setattr(routine, key, value)

    db.session.commit()
    return jsonify(routine.to_dict()), 200


@routines_bp.route("/<int:routine_id>", methods=["DELETE"])
@jwt_required()
def delete_routine(routine_id):
    routine = get_owned_routine(current_user_id(), routine_id)
    db.session.delete(routine)
    db.session.commit()
    return jsonify({"success": True}), 200
