# backend/zengym/models/workout.py
from .. import db
from ..clock import utc_now


class WorkoutRoutine(db.Model):
    __tablename__ = "workout_routines"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(255))
    duration_minutes = db.Column(db.Integer)
    # ordered list of exercise lines, e.g. "Push-ups - 3 sets of 12"
    exercises = db.Column(db.JSON, nullable=False, default=list)

    user = db.relationship("User", backref="routines")

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "description": self.description,
            "duration_minutes": self.duration_minutes,
            "exercises": list(self.exercises or []),
        }


class WorkoutSession(db.Model):
    __tablename__ = "workout_sessions"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    # plain reference, deleting a routine keeps its sessions
    routine_id = db.Column(db.Integer)
    duration_minutes = db.Column(db.Integer)
    completed_at = db.Column(db.DateTime, nullable=False, default=utc_now, index=True)

    def to_dict(self):
        return session_to_dict(self)


def session_to_dict(s):
    return {
        "id": s.id,
        "user_id": s.user_id,
        "routine_id": s.routine_id,
        "duration_minutes": s.duration_minutes,
        "completed_at": s.completed_at.isoformat() if s.completed_at else None,
    }
